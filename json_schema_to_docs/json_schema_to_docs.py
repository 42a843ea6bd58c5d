import json
import logging
from pathlib import Path

import click

from .atomic_writer import AtomicWriter
from .builder import DocsBuilder
from .cli_utils import reconstruct_command_line
from .config import DocsConfig
from .errors import DocAnnotationError, DocsWriteError, SchemaLoadError
from .loader import load_schemas


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Title of the documented schemas (default: input file name)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--root", "-r", default=None, type=str, help="Id of the root schema (default: first schema in the file)")
@click.option("--schema-version", default=None, type=str, help="Version shown in the document header")
@click.option("--source-url", default=None, type=str, help="Base URL for source code links")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def json_schema_to_docs(name, config, root, schema_version, source_url, verbose, path, output):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config_data = {}
    if config is not None:
        with open(config) as f:
            config_data = json.load(f)
        if not isinstance(config_data, dict):
            raise click.ClickException("Config file must contain a JSON object")
    config_data.setdefault("title", Path(path).stem)
    config = DocsConfig.from_dict(config_data)

    # CLI flags override the config file
    if name is not None:
        config.title = name
    if schema_version is not None:
        config.version = schema_version
    if source_url is not None:
        config.source_base_url = source_url
    config.command = reconstruct_command_line(json_schema_to_docs)

    try:
        schema = load_schemas(path, root)
        docs = DocsBuilder(config).build(schema)
        AtomicWriter().write(Path(output), docs + "\n")
    except (SchemaLoadError, DocAnnotationError, DocsWriteError) as e:
        raise click.ClickException(str(e)) from e
