"""localcas command line interface.

Thin command surface over ``ObjectManager``. Every failure becomes a
one-line diagnostic on stderr and exit status 1.
"""

# Standard library
from pathlib import Path
from typing import NoReturn

# Third-party
import typer

# Local imports
from localcas import __version__
from localcas.core.errors import LocalcasError
from localcas.core.logging import configure_logging, get_logger
from localcas.core.models import DEFAULT_KIND, StoredObject
from localcas.core.validation import ValidationError
from localcas.managers.manager import ObjectManager

logger = get_logger(__name__)

app = typer.Typer(
    name="localcas",
    help="localcas: a content-addressable object store.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"localcas version {__version__}")
        raise typer.Exit()


def _fail(message: str) -> NoReturn:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


def _manager(ctx: typer.Context) -> ObjectManager:
    manager: ObjectManager = ctx.obj
    return manager


@app.callback()
def main(
    ctx: typer.Context,
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Repository directory (default: $LOCALCAS_REPO or ./.localcas).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """localcas: a content-addressable object store."""
    configure_logging(level="DEBUG" if verbose else "WARNING")
    ctx.obj = ObjectManager(repo)


@app.command()
def init(ctx: typer.Context) -> None:
    """Create an empty repository."""
    manager = _manager(ctx)
    try:
        path: Path = manager.init()
    except LocalcasError as exc:
        _fail(str(exc))
    typer.echo(f"Initialized empty repository at {path}")


@app.command("hash-object")
def hash_object(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="File whose contents to hash."),
    write: bool = typer.Option(
        False,
        "-w",
        "--write",
        help="Also write the object into the repository.",
    ),
    kind: str = typer.Option(
        DEFAULT_KIND,
        "-t",
        "--type",
        help="Object kind tag.",
    ),
) -> None:
    """Print the digest of a file's contents as an object of KIND."""
    manager = _manager(ctx)
    try:
        hash_val: str = manager.hash_file(path, kind, write=write)
    except OSError as exc:
        _fail(f"cannot read file {path}: {exc.strerror or exc}")
    except (LocalcasError, ValidationError) as exc:
        _fail(str(exc))
    typer.echo(hash_val)


@app.command("cat-file")
def cat_file(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="Expected object kind (not used for lookup)."),
    digest: str = typer.Argument(..., help="Object digest."),
) -> None:
    """Write an object's payload to standard output."""
    manager = _manager(ctx)
    try:
        obj: StoredObject = manager.get(digest.lower())
    except (LocalcasError, ValidationError) as exc:
        _fail(str(exc))
    if obj.kind != kind:
        logger.warning("kind_mismatch", digest=digest, expected=kind, actual=obj.kind)
    typer.echo(obj.payload, nl=False)


@app.command()
def verify(
    ctx: typer.Context,
    digest: str = typer.Argument(..., help="Object digest."),
) -> None:
    """Recompute an object's digest and check it matches its address."""
    manager = _manager(ctx)
    hash_val = digest.lower()
    try:
        ok: bool = manager.verify(hash_val)
    except (LocalcasError, ValidationError) as exc:
        _fail(str(exc))
    if not ok:
        _fail(f"object {hash_val} does not hash to its address")
    typer.echo(f"ok {hash_val}")


@app.command()
def show(
    ctx: typer.Context,
    digest: str = typer.Argument(..., help="Object digest."),
) -> None:
    """Display information about one object."""
    manager = _manager(ctx)
    try:
        manager.show(digest.lower())
    except (LocalcasError, ValidationError) as exc:
        _fail(str(exc))


@app.command("ls-objects")
def ls_objects(
    ctx: typer.Context,
    kind: str | None = typer.Option(
        None,
        "-t",
        "--type",
        help="Only list objects of this kind.",
    ),
) -> None:
    """List stored objects."""
    manager = _manager(ctx)
    try:
        manager.show_all(kind=kind)
    except LocalcasError as exc:
        _fail(str(exc))


if __name__ == "__main__":
    app()
