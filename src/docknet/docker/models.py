from typing import Annotated, Any, ClassVar, Dict, FrozenSet, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator


class WireModel(BaseModel):
    """Base class for Docker Engine API payloads.

    Field names follow the Docker wire keys; where the wire key differs the
    field carries an alias. ``null`` values sent by the daemon decode to the
    field default. Fields listed in ``omit_empty`` are left out of the
    serialized payload when they hold an empty value, and fields listed in
    ``omit_none`` only when they are unset (an explicitly empty record is
    still sent as ``{}``).
    """

    model_config = ConfigDict(populate_by_name=True)

    omit_empty: ClassVar[FrozenSet[str]] = frozenset()
    omit_none: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @model_serializer(mode="wrap")
    def _drop_empty(self, handler):
        data = handler(self)
        for name in self.omit_empty:
            for key in (name, type(self).model_fields[name].alias):
                if key in data and not data[key]:
                    del data[key]
        for name in self.omit_none:
            for key in (name, type(self).model_fields[name].alias):
                if key in data and data[key] is None:
                    del data[key]
        return data

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready dict sent to the daemon."""
        return self.model_dump(mode="json", by_alias=True)


class Endpoint(WireModel):
    model_config = ConfigDict(frozen=True)

    Name: str = ""
    ID: str = Field("", alias="EndpointID")
    MacAddress: str = ""
    IPv4Address: str = ""
    IPv6Address: str = ""


class IPAMConfig(WireModel):
    omit_empty = frozenset({"Subnet", "IPRange", "Gateway", "AuxAddress"})

    Subnet: str = ""
    IPRange: str = ""
    Gateway: str = ""
    AuxAddress: Dict[str, str] = Field(default_factory=dict, alias="AuxiliaryAddresses")


class IPAMOptions(WireModel):
    Driver: str = ""
    # "Config" collides with the legacy pydantic config hook
    Configs: List[IPAMConfig] = Field(default_factory=list, alias="Config")


class Network(WireModel):
    model_config = ConfigDict(frozen=True)

    Name: str = ""
    ID: str = Field("", alias="Id")
    Created: str = ""
    Scope: str = ""
    Driver: str = ""
    EnableIPv6: bool = False
    IPAM: IPAMOptions = Field(default_factory=IPAMOptions)
    Internal: bool = False
    Attachable: bool = False
    Ingress: bool = False
    Containers: Dict[str, Endpoint] = Field(default_factory=dict)
    Options: Dict[str, str] = Field(default_factory=dict)
    Labels: Dict[str, str] = Field(default_factory=dict)


class CreateNetworkOptions(WireModel):
    Name: str
    CheckDuplicate: bool = False
    Driver: str = ""
    IPAM: IPAMOptions = Field(default_factory=IPAMOptions)
    Options: Dict[str, Any] = Field(default_factory=dict)
    Labels: Dict[str, str] = Field(default_factory=dict)
    Internal: bool = False
    EnableIPv6: bool = False


class CreateNetworkResponse(WireModel):
    ID: str = Field("", alias="Id")
    Warning: str = ""


class EndpointIPAMConfig(WireModel):
    omit_empty = frozenset({"IPv4Address", "IPv6Address"})

    IPv4Address: str = ""
    IPv6Address: str = ""


class EndpointConfig(WireModel):
    omit_empty = frozenset(
        {
            "Links",
            "Aliases",
            "NetworkID",
            "EndpointID",
            "Gateway",
            "IPAddress",
            "IPPrefixLen",
            "IPv6Gateway",
            "GlobalIPv6Address",
            "GlobalIPv6PrefixLen",
            "MacAddress",
        }
    )
    omit_none = frozenset({"IPAMConfig"})

    IPAMConfig: Optional[EndpointIPAMConfig] = None
    Links: List[str] = Field(default_factory=list)
    Aliases: List[str] = Field(default_factory=list)
    NetworkID: str = ""
    EndpointID: str = ""
    Gateway: str = ""
    IPAddress: str = ""
    IPPrefixLen: int = 0
    IPv6Gateway: str = ""
    GlobalIPv6Address: str = ""
    GlobalIPv6PrefixLen: int = 0
    MacAddress: str = ""


class NetworkConnectionOptions(WireModel):
    omit_none = frozenset({"EndpointConfig"})

    Container: str
    # Only read by connect
    EndpointConfig: Annotated[Optional[EndpointConfig], Field(default=None)]
    # Only read by disconnect
    Force: bool = False


NetworkFilterOpts = Dict[str, Dict[str, bool]]


def normalize_filters(
    filters: Mapping[str, Union[str, Iterable[str], Mapping[str, bool]]]
) -> NetworkFilterOpts:
    """Bring filters into the ``{key: {value: true}}`` form the daemon expects.

    Values may already be in that form, or be a single string or an iterable
    of strings.
    """
    normalized: NetworkFilterOpts = {}
    for key, value in filters.items():
        if isinstance(value, Mapping):
            normalized[key] = {str(item): bool(flag) for item, flag in value.items()}
        elif isinstance(value, str):
            normalized[key] = {value: True}
        else:
            normalized[key] = {str(item): True for item in value}
    return normalized
