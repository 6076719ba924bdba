"""
classenum CLI.

Commands for inspecting an enumeration and converting its members to and
from their JSON form. The enumeration is given as ``module:attribute``
with --enum, or through CLASSENUM_ENUM, and defaults to the bundled
example.
"""

from __future__ import annotations

import importlib
import platform
from typing import Any

import typer

from classenum._version import get_version
from classenum.core.converter import EnumerationConverter, can_convert
from classenum.core.enumeration import Enumeration
from classenum.core.environment import configure_logging, get_default_enum_path
from classenum.core.errors import ClassEnumError

app = typer.Typer(help="Inspect class enums and convert members to and from JSON")


def version_callback(value: bool) -> None:
    """Display version and interpreter information."""
    if value:
        typer.echo(f"classenum version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: CLASSENUM_LOG_LEVEL or WARNING)",
    ),
) -> None:
    """classenum CLI main callback for global options."""
    configure_logging(log_level)


EnumOption = typer.Option(
    None, "--enum", "-e", help="Enumeration as module:attribute (default: CLASSENUM_ENUM)"
)


def load_enumeration(path: str | None) -> type[Enumeration[Any]]:
    """Import the enumeration class named by a ``module:attribute`` path."""
    path = path or get_default_enum_path()
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise typer.BadParameter(f"'{path}' is not of the form module:attribute")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"Cannot import module '{module_name}': {e}") from e
    enum_type = getattr(module, attr, None)
    if not can_convert(enum_type):
        raise typer.BadParameter(f"'{path}' is not an Enumeration subclass")
    return enum_type


def _fail(error: ClassEnumError) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.command()
def demo() -> None:
    """Round-trip MyEnum.MY_CLASS_1 through JSON and call its payload."""
    from classenum.example import MyEnum

    original = MyEnum.MY_CLASS_1
    converter = EnumerationConverter(MyEnum)

    text = converter.serialize(original)
    recovered = converter.deserialize(text)

    typer.echo(f"Member:        {original!r}")
    typer.echo(f"Serialized:    {text}")
    typer.echo(f"Deserialized:  {recovered!r} (same object: {recovered is original})")
    typer.echo(f"Result:        {recovered.value.my_common_method()}")


@app.command()
def members(enum: str | None = EnumOption) -> None:
    """List members ordered by id."""
    enum_type = load_enumeration(enum)
    converter = EnumerationConverter(enum_type)
    for m in sorted(enum_type.get_all()):
        typer.echo(f"{m.id:>4}  {m.name:<24} {converter.write(m)}")


@app.command()
def encode(
    name: str = typer.Argument(..., help="Member name, e.g. MY_CLASS_1"),
    enum: str | None = EnumOption,
) -> None:
    """Print the JSON form of a member."""
    enum_type = load_enumeration(enum)
    try:
        typer.echo(EnumerationConverter(enum_type).serialize(enum_type.from_name(name)))
    except ClassEnumError as e:
        _fail(e)


@app.command()
def decode(
    text: str = typer.Argument(..., help='JSON string, e.g. \'"classenum.example.MyClass1"\''),
    enum: str | None = EnumOption,
) -> None:
    """Print the name of the member a JSON tag resolves to."""
    enum_type = load_enumeration(enum)
    try:
        typer.echo(EnumerationConverter(enum_type).deserialize(text).name)
    except ClassEnumError as e:
        _fail(e)


def main() -> None:
    app()
