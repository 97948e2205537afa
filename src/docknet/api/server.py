from fastapi import FastAPI

from docknet.api.dtos import VersionInfo, VersionResponse
from docknet.api.routers import docker
from docknet.version import get_version

app = FastAPI(
    title="docknet API",
    description="Manage Docker networks over HTTP.",
    version=get_version(),
)

app.include_router(docker.router)


@app.get("/version", response_model=VersionResponse, tags=["Info"])
def version():
    return VersionResponse(data=VersionInfo(version=get_version()))
