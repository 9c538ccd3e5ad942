# main.py
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from foodpos.api.endpoints import customers, menu, orders
from foodpos.api.errors import register_exception_handlers
from foodpos.core.config import settings
from foodpos.core.database import init_db
from foodpos.core.logging_config import configure_logging

configure_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Food ordering point of sale: orders, payments and stock",
    version="1.0"
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Local SQLite runs skip Alembic
if settings.DATABASE_URL.startswith("sqlite"):
    init_db()

# Include the separated routers
app.include_router(orders.router, prefix="/orders", tags=["Orders"])
app.include_router(customers.router, prefix="/customers", tags=["Customers"])
app.include_router(menu.router, prefix="/menu", tags=["Menu"])


@app.get("/")
def read_root():
    return {"status": "FoodPOS Online"}

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
