"""
Compute command: combine components into a device identifier
"""

import json
import typer
from typing import Dict, List, Optional, Tuple
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from deviceid.builder import DeviceIdBuilder
from deviceid.config import ENCODERS, Settings, build_formatter
from deviceid.core.errors import ConfigurationError
from deviceid.core.hashing import HASH_ALGORITHMS, available_hash_algorithms
from deviceid.logging_config import get_logger, setup_logging

console = Console()
err_console = Console(stderr=True)


def parse_component(raw: str) -> Tuple[str, str]:
    """
    Split NAME=VALUE on the first '='.

    The value may be empty or contain further '=' characters; the name may not be empty.
    """
    name, sep, value = raw.partition("=")
    if not sep or not name:
        raise typer.BadParameter(f"expected NAME=VALUE, got {raw!r}", param_hint="--component")
    return name, value


def parse_components(raw_components: List[str]) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for raw in raw_components:
        name, value = parse_component(raw)
        parsed[name] = value
    return parsed


def compute_command(
    components: Optional[List[str]] = typer.Option(
        None,
        "--component",
        "-c",
        help="Component as NAME=VALUE (repeatable)",
    ),
    algorithm: Optional[str] = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Hash algorithm (default: $DEVICEID_HASH_ALGORITHM)",
    ),
    encoding: Optional[str] = typer.Option(
        None,
        "--encoding",
        "-e",
        help="Digest encoding: hex, hex-upper, base64, base64url, base32 (default: $DEVICEID_ENCODING)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Compute a device identifier from NAME=VALUE components.

    Examples:
        deviceid compute -c CPU=ABC123 -c BIOS=XYZ789 -a md5 -e hex
        deviceid compute -c MachineName=build-07 -a sha256 -e base32 --json
    """
    try:
        settings = Settings.from_env().with_overrides(hash_algorithm=algorithm, encoding=encoding)
        setup_logging(settings)
        values = parse_components(components or [])
        formatter = build_formatter(settings)
    except (typer.BadParameter, ConfigurationError) as e:
        _fail(str(e), json_output)

    logger = get_logger(__name__, trace_id="compute")
    logger.debug("Computing device id from components: %s", ", ".join(sorted(values)))

    builder = DeviceIdBuilder(formatter)
    for name, value in values.items():
        builder.add_value(name, value)
    device_id = builder.to_string()

    if json_output:
        print(json.dumps({
            "device_id": device_id,
            "algorithm": settings.hash_algorithm,
            "encoding": settings.encoding,
            "components": sorted(values),
        }, indent=2))
    else:
        print(device_id)


def algorithms_command():
    """
    List supported hash algorithms and encodings.
    """
    table = Table(title="Hash algorithms")
    table.add_column("Name", style="cyan")
    table.add_column("Shortcut", style="green")
    for name in available_hash_algorithms():
        table.add_row(name, "yes" if name in HASH_ALGORITHMS else "")
    console.print(table)

    table = Table(title="Encodings")
    table.add_column("Name", style="cyan")
    for name in sorted(ENCODERS):
        table.add_row(name)
    console.print(table)


def _fail(message: str, json_output: bool) -> None:
    if json_output:
        print(json.dumps({"error": message}))
    else:
        err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(2)
