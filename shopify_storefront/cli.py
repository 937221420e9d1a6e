"""Command-line interface for the Shopify storefront."""

import asyncio
import json
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.table import Table
from rich.json import JSON

from .client import ShopifyStorefront
from .config import StorefrontConfig
from .constants import SORTING, find_sort

app = typer.Typer(
    name="shopify-storefront",
    help="Shopify Storefront API data layer CLI"
)
console = Console()


def load_config(config_path: str) -> StorefrontConfig:
    """Load configuration from a JSON file, or from the environment if the file is absent."""
    config_file = Path(config_path)
    if not config_file.exists():
        console.print(f"[yellow]Config file not found: {config_path}; reading SHOPIFY_* environment variables[/yellow]")
        return StorefrontConfig.from_env()

    with open(config_file) as f:
        config_data = json.load(f)

    return StorefrontConfig(**config_data)


@app.command()
def init(
    output: str = typer.Option("config.json", help="Output configuration file path")
):
    """Initialize a new configuration file with example values."""
    example_config = {
        "shopify": {
            "store_domain": "your-store.myshopify.com",
            "storefront_access_token": "your_storefront_access_token_here",
            "api_version": "2023-01",
            "revalidation_secret": "your_revalidation_secret_here"
        },
        "cache": {
            "enabled": True,
            "ttl_seconds": 86400
        },
        "telemetry": {
            "console_export": False
        },
        "site_name": "Your Store Name",
        "log_level": "INFO"
    }

    output_path = Path(output)
    with open(output_path, 'w') as f:
        json.dump(example_config, f, indent=2)

    console.print(f"[green]✓[/green] Configuration file created: {output}")
    console.print("\n[yellow]⚠ Please edit the file and add your Storefront API credentials![/yellow]")


@app.command()
def validate(
    config: str = typer.Option("config.json", help="Configuration file path"),
):
    """Validate configuration file."""
    try:
        cfg = load_config(config)
    except Exception as e:
        console.print(f"[red]✗ Configuration error:[/red] {str(e)}")
        raise typer.Exit(1)

    console.print("[green]✓[/green] Configuration is valid!")
    console.print(f"\n[bold]Site:[/bold] {cfg.site_name}")
    console.print(f"[bold]Endpoint:[/bold] {cfg.shopify.endpoint}")
    console.print(f"[bold]Cache:[/bold] {'on' if cfg.cache.enabled else 'off'} ({cfg.cache.ttl_seconds}s)")
    if not cfg.shopify.store_domain:
        console.print("[yellow]No store domain set: every page will be served from mock data[/yellow]")
    if not cfg.shopify.revalidation_secret:
        console.print("[yellow]No revalidation secret set: every webhook will be rejected[/yellow]")


@app.command()
def serve(
    config: str = typer.Option("config.json", help="Configuration file path"),
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to bind to"),
):
    """Start the storefront server."""
    from .app import create_app
    import uvicorn

    cfg = load_config(config)
    storefront_app = create_app(cfg)

    console.print(f"[green]Starting storefront on {host}:{port}[/green]")
    console.print(f"[blue]Revalidation endpoint: http://{host}:{port}/api/revalidate?secret=...[/blue]")

    uvicorn.run(storefront_app, host=host, port=port)


@app.command()
def products(
    query: Optional[str] = typer.Option(None, help="Storefront search query"),
    sort: Optional[str] = typer.Option(None, help=f"Sort slug ({', '.join(s.slug for s in SORTING if s.slug)})"),
    limit: int = typer.Option(10, help="Number of products to show"),
    config: str = typer.Option("config.json", help="Configuration file path"),
    output: Optional[str] = typer.Option(None, help="Output file for JSON (optional)"),
):
    """Fetch products and print them."""

    async def _products():
        cfg = load_config(config)
        sort_item = find_sort(sort)

        async with ShopifyStorefront(cfg) as storefront:
            console.print(f"[blue]Fetching products ({sort_item.title})...[/blue]")
            results = await storefront.get_products(
                query=query,
                reverse=sort_item.reverse,
                sort_key=sort_item.sort_key,
            )

        results = results[:limit]

        table = Table(title="Products")
        table.add_column("Handle", style="cyan")
        table.add_column("Title", style="green")
        table.add_column("Price", justify="right", style="yellow")
        table.add_column("Variants", justify="right", style="magenta")

        for product in results:
            price = product.price_range.min_variant_price
            table.add_row(
                product.handle,
                product.title[:50] + "..." if len(product.title) > 50 else product.title,
                f"{price.amount} {price.currency_code}",
                str(len(product.variants)),
            )

        console.print(table)

        dumped = [p.model_dump(mode='json', by_alias=True) for p in results]
        if output:
            with open(Path(output), 'w') as f:
                json.dump(dumped, f, indent=2, default=str)
            console.print(f"\n[green]✓[/green] Saved to {output}")
        elif dumped:
            console.print("\n[bold]First product:[/bold]")
            console.print(JSON(json.dumps(dumped[0], default=str, indent=2)))

    asyncio.run(_products())


@app.command()
def collections(
    config: str = typer.Option("config.json", help="Configuration file path"),
):
    """List browsable collections."""

    async def _collections():
        cfg = load_config(config)
        async with ShopifyStorefront(cfg) as storefront:
            results = await storefront.get_collections()

        table = Table(title="Collections")
        table.add_column("Handle", style="cyan")
        table.add_column("Title", style="green")
        table.add_column("Path", style="yellow")
        for collection in results:
            table.add_row(collection.handle or "-", collection.title, collection.path)
        console.print(table)

    asyncio.run(_collections())


if __name__ == "__main__":
    app()
