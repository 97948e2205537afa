import click

from docknet.docker.errors import NetworkError
from docknet.docker.models import (
    CreateNetworkOptions,
    EndpointConfig,
    EndpointIPAMConfig,
    IPAMConfig,
    IPAMOptions,
    NetworkConnectionOptions,
)


def get_network_client():
    from docknet.docker.networks import get_client

    return get_client()


def parse_pairs(values, option_name):
    """Turn repeated KEY=VALUE options into a dict."""
    pairs = {}
    for value in values:
        key, sep, item = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"'{value}' is not in KEY=VALUE form.", param_hint=option_name
            )
        pairs[key] = item
    return pairs


@click.group()
@click.pass_context
def network(ctx):
    """Docker network commands"""
    pass


@network.command(name="list-networks")
@click.option(
    "--filter",
    "filters",
    multiple=True,
    help="Filter as KEY=VALUE, e.g. driver=bridge. Can be repeated.",
)
def list_networks(filters):
    """List docker networks."""
    client = get_network_client()

    if filters:
        wanted = {}
        for value in filters:
            key, item = next(iter(parse_pairs([value], "--filter").items()))
            wanted.setdefault(key, {})[item] = True
        networks = client.filtered_list_networks(wanted)
    else:
        networks = client.list_networks()

    if not networks:
        click.echo("No networks found.")
        return
    for net in networks:
        click.echo(f"{net.ID[:12]} - {net.Name} - {net.Driver} - {net.Scope}")


@network.command(name="describe-network")
@click.argument("network_id")
def describe_network(network_id):
    """Describe a docker network."""
    client = get_network_client()
    try:
        net = client.network_info(network_id)
    except NetworkError as e:
        raise click.ClickException(str(e))

    for key, value in net:
        click.echo(f"{key}: {value}")


@network.command(name="create-network")
@click.argument("name")
@click.option("--driver", default="", help="Network driver, e.g. bridge or overlay.")
@click.option("--ipam-driver", default="", help="IPAM driver.")
@click.option("--subnet", default="", help="Subnet in CIDR form.")
@click.option("--ip-range", default="", help="Allocate container IPs from this sub-range.")
@click.option("--gateway", default="", help="Gateway for the subnet.")
@click.option("--label", "labels", multiple=True, help="Label as KEY=VALUE. Can be repeated.")
@click.option("--opt", "options", multiple=True, help="Driver option as KEY=VALUE. Can be repeated.")
@click.option("--internal", is_flag=True, help="Restrict external access to the network.")
@click.option("--ipv6", is_flag=True, help="Enable IPv6 networking.")
@click.option("--check-duplicate", is_flag=True, help="Ask the daemon to reject duplicate names.")
def create_network(
    name,
    driver,
    ipam_driver,
    subnet,
    ip_range,
    gateway,
    labels,
    options,
    internal,
    ipv6,
    check_duplicate,
):
    """Create a docker network."""
    if (ip_range or gateway) and not subnet:
        raise click.UsageError("--ip-range and --gateway require --subnet.")

    configs = []
    if subnet:
        configs.append(IPAMConfig(Subnet=subnet, IPRange=ip_range, Gateway=gateway))

    opts = CreateNetworkOptions(
        Name=name,
        CheckDuplicate=check_duplicate,
        Driver=driver,
        IPAM=IPAMOptions(Driver=ipam_driver, Configs=configs),
        Options=parse_pairs(options, "--opt"),
        Labels=parse_pairs(labels, "--label"),
        Internal=internal,
        EnableIPv6=ipv6,
    )

    client = get_network_client()
    try:
        net = client.create_network(opts)
    except NetworkError as e:
        raise click.ClickException(f"{e}: {name}")
    click.echo(f"Network '{net.Name}' created: {net.ID}")


@network.command(name="remove-network")
@click.argument("network_id")
def remove_network(network_id):
    """Remove a docker network."""
    client = get_network_client()
    try:
        client.remove_network(network_id)
    except NetworkError as e:
        raise click.ClickException(str(e))
    click.echo(f"Network '{network_id}' removed.")


@network.command(name="connect-network")
@click.argument("network_id")
@click.argument("container")
@click.option("--ip", "ipv4", default="", help="Static IPv4 address for the container.")
@click.option("--ip6", "ipv6", default="", help="Static IPv6 address for the container.")
@click.option("--alias", "aliases", multiple=True, help="Network-scoped alias. Can be repeated.")
@click.option("--link", "links", multiple=True, help="Link to another container. Can be repeated.")
def connect_network(network_id, container, ipv4, ipv6, aliases, links):
    """Connect a container to a docker network."""
    endpoint = None
    if ipv4 or ipv6 or aliases or links:
        ipam = None
        if ipv4 or ipv6:
            ipam = EndpointIPAMConfig(IPv4Address=ipv4, IPv6Address=ipv6)
        endpoint = EndpointConfig(
            IPAMConfig=ipam, Aliases=list(aliases), Links=list(links)
        )

    client = get_network_client()
    try:
        client.connect_network(
            network_id,
            NetworkConnectionOptions(Container=container, EndpointConfig=endpoint),
        )
    except NetworkError as e:
        raise click.ClickException(str(e))
    click.echo(f"Container '{container}' connected to network '{network_id}'.")


@network.command(name="disconnect-network")
@click.argument("network_id")
@click.argument("container")
@click.option("--force", is_flag=True, help="Force the container to disconnect.")
def disconnect_network(network_id, container, force):
    """Disconnect a container from a docker network."""
    client = get_network_client()
    try:
        client.disconnect_network(
            network_id, NetworkConnectionOptions(Container=container, Force=force)
        )
    except NetworkError as e:
        raise click.ClickException(str(e))
    click.echo(f"Container '{container}' disconnected from network '{network_id}'.")
