"""CLI commands for the Product entity."""

from __future__ import annotations

import click

from catalog.application.dto import ProductRequest
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_service


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 0.50).")
@click.option("--stock", required=True, type=int, help="Units on hand (below 20).")
def product_add(name: str, price: str, stock: int) -> None:
    """Add a new product to the catalog."""
    service = product_service()

    try:
        product = service.save(ProductRequest(name=name, price=price, stock=stock))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at "
        f"${product.price:.2f} (stock {product.stock})"
    )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    service = product_service()

    try:
        product = service.find_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}")
    click.echo(f"  Name:  {product.name}")
    click.echo(f"  Price: ${product.price:.2f}")
    click.echo(f"  Stock: {product.stock}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_service().find_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 45)
    for p in products:
        price = f"${p.price:.2f}"
        click.echo(f"{p.id:<6} {p.name:<20} {price:>10} {p.stock:>6}")
