from fastapi import FastAPI

from climate_check.api import health, probe

app = FastAPI(title="WatchDog Climate Check")

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(probe.router, prefix="/probe", tags=["probe"])
