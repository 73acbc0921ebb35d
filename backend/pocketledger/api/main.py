from fastapi import FastAPI

from pocketledger.api.routes.health import router as health_router
from pocketledger.api.routes.assets import router as assets_router
from pocketledger.api.routes.liabilities import router as liabilities_router
from pocketledger.api.routes.incomes import router as incomes_router
from pocketledger.api.routes.expenditures import router as expenditures_router
from pocketledger.api.routes.dashboard import router as dashboard_router


app = FastAPI(title="pocketledger API", version="0.1.0")

app.include_router(health_router)
app.include_router(assets_router)
app.include_router(liabilities_router)
app.include_router(incomes_router)
app.include_router(expenditures_router)
app.include_router(dashboard_router)
