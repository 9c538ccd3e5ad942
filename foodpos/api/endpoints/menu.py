# foodpos/api/endpoints/menu.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from foodpos.core.database import get_db
from foodpos.models.schemas import MenuItemResponse
from foodpos.services.repositories import MenuCatalog

router = APIRouter()


@router.get("", response_model=List[MenuItemResponse])
def list_menu(db: Session = Depends(get_db)):
    return MenuCatalog(db).find_all()
