from fastapi import APIRouter

from docknet.api.routers.docker import networks

router = APIRouter(prefix="/docker")

router.include_router(networks.router)
