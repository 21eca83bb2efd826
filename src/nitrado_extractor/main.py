"""Main CLI entry point for the Nitrado API extractor."""

from pathlib import Path

import typer
from rich.console import Console

from nitrado_extractor.config import ConverterConfig, FileFormat, load_env, resolve_config
from nitrado_extractor.converter.assembler import ApiDocConverter
from nitrado_extractor.core.loader import load_api_data, load_openapi_document, parse_api_data
from nitrado_extractor.core.validator import validate_operation_ids
from nitrado_extractor.core.writer import output_filename, write_spec

RAW_DATA_FILENAME = "nitrado-api.json"
OPENAPI_BASENAME = "nitrado-openapi"

app = typer.Typer(
    name="nitrado-api-extractor",
    help="Extract Nitrado apiDoc documentation and convert it to OpenAPI 3.1.1",
)
console = Console()

ConfigOption = typer.Option(
    None, "--config", "-c", help="YAML config file (default: ./.nitrado-extractor.yaml)"
)
OutputDirOption = typer.Option(
    None, "--output-dir", envvar="NITRADO_OUTPUT_DIR", help="Output directory for generated files"
)
ServerUrlOption = typer.Option(
    None, "--server-url", envvar="NITRADO_SERVER_URL", help="API server URL for the OpenAPI spec"
)
TitleOption = typer.Option(
    None, "--api-title", envvar="NITRADO_API_TITLE", help="API title for the OpenAPI spec"
)
DescriptionOption = typer.Option(
    None,
    "--api-description",
    envvar="NITRADO_API_DESCRIPTION",
    help="API description for the OpenAPI spec",
)
VersionOption = typer.Option(
    None, "--api-version", envvar="NITRADO_API_VERSION", help="API version for the OpenAPI spec"
)
ContactNameOption = typer.Option(
    None, "--contact-name", envvar="NITRADO_CONTACT_NAME", help="Contact name for the OpenAPI spec"
)
ContactUrlOption = typer.Option(
    None, "--contact-url", envvar="NITRADO_CONTACT_URL", help="Contact URL for the OpenAPI spec"
)
LicenseNameOption = typer.Option(
    None, "--license-name", envvar="NITRADO_LICENSE_NAME", help="License name for the OpenAPI spec"
)
LicenseUrlOption = typer.Option(
    None, "--license-url", envvar="NITRADO_LICENSE_URL", help="License URL for the OpenAPI spec"
)
FormatOption = typer.Option(
    None, "--format", "-f", envvar="NITRADO_OUTPUT_FORMAT", help="Output format: json or yaml"
)
VerboseOption = typer.Option(
    False, "--verbose", "-v", envvar="NITRADO_VERBOSE", help="Enable verbose output"
)
DryRunOption = typer.Option(
    False, "--dry-run", envvar="NITRADO_DRY_RUN", help="Run without writing any files"
)


@app.callback()
def main() -> None:
    """Extract Nitrado apiDoc documentation and convert it to OpenAPI 3.1.1.

    NITRADO_* variables are also read from a .env file in the working
    directory; variables already set in the environment take precedence.
    """
    # Runs before the subcommand resolves its envvar-backed options
    load_env()


def _fail(message: str, config: ConverterConfig | None = None) -> None:
    console.print(f"[bold red]✗[/bold red] {message}")
    if config and config.verbose:
        console.print_exception()
    raise typer.Exit(1)


def _build_config(config_file: Path | None, **overrides) -> ConverterConfig:
    try:
        return resolve_config(config_file, **overrides)
    except Exception as e:
        console.print(f"[bold red]✗[/bold red] Invalid configuration: {e}")
        raise typer.Exit(1)


def _convert_and_save(converter: ApiDocConverter, config: ConverterConfig) -> None:
    """Convert loaded data, write it unless dry-running, and report the result."""
    openapi_spec = converter.convert()
    path_count = len(openapi_spec["paths"])

    if converter.skipped:
        console.print(
            f"[bold yellow]![/bold yellow] Skipped {len(converter.skipped)} endpoint(s) without URL"
        )

    if config.dry_run:
        console.print("[bold blue]✓[/bold blue] Dry run mode - no files were written")
    else:
        output_file = Path(config.output_dir) / output_filename(
            OPENAPI_BASENAME, config.output_format
        )
        write_spec(openapi_spec, output_file, config.output_format)
        console.print(f"[bold green]✓[/bold green] OpenAPI spec written to: {output_file}")

    console.print()
    console.print("[bold]Summary:[/bold]")
    console.print(f"  - Extracted {len(converter.api_data['api'])} API endpoints")
    console.print(f"  - Generated OpenAPI spec with {path_count} paths")
    console.print(f"  - Operation ids issued: {len(converter.ledger)}")
    if not config.dry_run:
        console.print(f"  - Files saved to: {config.output_dir}/")


@app.command()
def extract(
    api_url: str = typer.Option(
        None, "--api-url", envvar="NITRADO_API_URL", help="Nitrado apiDoc data URL"
    ),
    config_file: Path = ConfigOption,
    output_dir: str = OutputDirOption,
    server_url: str = ServerUrlOption,
    api_title: str = TitleOption,
    api_description: str = DescriptionOption,
    api_version: str = VersionOption,
    contact_name: str = ContactNameOption,
    contact_url: str = ContactUrlOption,
    license_name: str = LicenseNameOption,
    license_url: str = LicenseUrlOption,
    output_format: FileFormat = FormatOption,
    verbose: bool = VerboseOption,
    dry_run: bool = DryRunOption,
) -> None:
    """Fetch apiDoc data, save it, and convert it to OpenAPI.

    This command will:
    1. Download the api_data.js document and strip its define() wrapper
    2. Save the raw endpoint data as nitrado-api.json
    3. Convert the endpoints to an OpenAPI 3.1.1 document and save it
    """
    config = _build_config(
        config_file,
        api_data_url=api_url,
        output_dir=output_dir,
        server_url=server_url,
        api_title=api_title,
        api_description=api_description,
        api_version=api_version,
        contact_name=contact_name,
        contact_url=contact_url,
        license_name=license_name,
        license_url=license_url,
        output_format=output_format,
        verbose=verbose or None,
        dry_run=dry_run or None,
    )

    if not config.api_data_url:
        _fail("API URL is required. Set NITRADO_API_URL or use --api-url.")

    console.print()
    console.print("[bold blue]Nitrado API Extractor[/bold blue]")
    console.print(f"[dim]Source: {config.api_data_url}[/dim]")
    console.print()

    converter = ApiDocConverter(config, console=console if config.verbose else None)

    with console.status("[bold yellow]Fetching API data..."):
        try:
            api_data = load_api_data(config.api_data_url, console=console)
        except Exception as e:
            _fail(f"Failed to fetch API data: {e}", config)

    if not converter.load(api_data):
        _fail("API data does not contain an endpoint list")
    console.print(f"[bold green]✓[/bold green] Fetched {len(api_data['api'])} API endpoints")

    try:
        if not config.dry_run:
            raw_path = Path(config.output_dir) / RAW_DATA_FILENAME
            raw_file = write_spec(api_data, raw_path, FileFormat.JSON)
            console.print(f"[bold green]✓[/bold green] Raw API data written to: {raw_file}")
        _convert_and_save(converter, config)
    except Exception as e:
        _fail(f"Error during execution: {e}", config)

    console.print()
    console.print("[bold green]✓ Success![/bold green] All tasks completed.")


@app.command()
def convert(
    input_file: Path = typer.Option(
        None, "--input", "-i", help="Raw apiDoc JSON (default: <output-dir>/nitrado-api.json)"
    ),
    config_file: Path = ConfigOption,
    output_dir: str = OutputDirOption,
    server_url: str = ServerUrlOption,
    api_title: str = TitleOption,
    api_description: str = DescriptionOption,
    api_version: str = VersionOption,
    contact_name: str = ContactNameOption,
    contact_url: str = ContactUrlOption,
    license_name: str = LicenseNameOption,
    license_url: str = LicenseUrlOption,
    output_format: FileFormat = FormatOption,
    verbose: bool = VerboseOption,
    dry_run: bool = DryRunOption,
) -> None:
    """Convert previously extracted apiDoc data to OpenAPI."""
    config = _build_config(
        config_file,
        output_dir=output_dir,
        server_url=server_url,
        api_title=api_title,
        api_description=api_description,
        api_version=api_version,
        contact_name=contact_name,
        contact_url=contact_url,
        license_name=license_name,
        license_url=license_url,
        output_format=output_format,
        verbose=verbose or None,
        dry_run=dry_run or None,
    )

    raw_file = input_file or Path(config.output_dir) / RAW_DATA_FILENAME
    if config.verbose:
        console.print(f"[dim]Loading API data from: {raw_file}[/dim]")

    if not raw_file.exists():
        console.print(f"[bold red]✗[/bold red] Error: API data file not found: {raw_file}")
        console.print("[dim]Run the full extractor first: nitrado-api-extractor extract[/dim]")
        raise typer.Exit(1)

    converter = ApiDocConverter(config, console=console if config.verbose else None)

    try:
        api_data = parse_api_data(raw_file.read_text(encoding="utf-8"), console=console)
    except Exception as e:
        _fail(str(e), config)

    if not converter.load(api_data):
        _fail(f"API data does not contain an endpoint list: {raw_file}")
    console.print(f"[bold green]✓[/bold green] Loaded existing API data from {raw_file.name}")

    try:
        _convert_and_save(converter, config)
    except Exception as e:
        _fail(f"Error: {e}", config)


@app.command()
def validate(
    spec_file: Path = typer.Argument(..., help="OpenAPI document (.json, .yaml or .yml)"),
) -> None:
    """Check an OpenAPI document for duplicate operation ids."""
    try:
        spec, _ = load_openapi_document(spec_file)
    except Exception as e:
        _fail(f"Failed to load {spec_file}: {e}")

    if not isinstance(spec, dict):
        _fail(f"{spec_file} is not an OpenAPI document")

    report = validate_operation_ids(spec)

    console.print(f"[dim]Paths: {report.total_paths}[/dim]")
    console.print(f"[dim]Unique operation ids: {report.total_operations}[/dim]")

    if report.ok:
        console.print("[bold green]✓[/bold green] All operation ids are unique")
        return

    count = len(report.duplicates)
    console.print(f"[bold red]✗[/bold red] Found {count} duplicate operation id(s):")
    for duplicate in report.duplicates:
        console.print(f"  - {duplicate.operation_id} ({duplicate.method} {duplicate.path})")
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
