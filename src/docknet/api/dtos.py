from typing import List, Optional, Union

from pydantic import BaseModel

from docknet.docker.models import Network


class BaseResponse(BaseModel):
    status: str = "success"
    message: Optional[str] = None


class SuccessResponse(BaseResponse):
    pass


class ErrorResponse(BaseResponse):
    status: str = "error"


class DataResponse(BaseResponse):
    data: Optional[Union[Network, List[Network]]] = None


class NetworkResponse(DataResponse):
    data: Network


class NetworkListResponse(DataResponse):
    data: List[Network]


class VersionInfo(BaseModel):
    version: str


class VersionResponse(BaseResponse):
    data: VersionInfo
