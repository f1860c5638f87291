"""CLI commands and prompts for the menu (product catalog)."""

from __future__ import annotations

import click

from coffeeshop.application.shop_registry import ShopRegistry
from coffeeshop.domain.exceptions import DomainException
from coffeeshop.domain.model.user import User
from coffeeshop.infrastructure.bootstrap import build_shop


def echo_menu(shop: ShopRegistry) -> None:
    products = shop.list_products()
    click.echo("Coffee Shop Menu:")
    if not products:
        click.echo("  (the menu is empty)")
        return
    for product in products:
        click.echo(f"  {product.describe()}")


@click.command("menu")
def menu_show() -> None:
    """Show the default menu."""
    echo_menu(build_shop())


# --- Interactive management (administrators) ---------------------------------


def _add_product(shop: ShopRegistry, admin: User) -> None:
    types = shop.product_types
    type_tag = click.prompt("Product type", type=click.Choice(types, case_sensitive=False))
    name = click.prompt("Product name")
    price = click.prompt("Price")
    stock = click.prompt("Stock", type=int)
    if type_tag.lower() == "coffee":
        extra = click.prompt("Size", default="Regular")
    elif type_tag.lower() == "snack":
        extra = click.prompt("Vegetarian? (true/false)")
    else:
        extra = click.prompt("Contains sugar? (true/false)")

    product = shop.create_product(admin, type_tag, name, price, stock, extra)
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


def _update_product(shop: ShopRegistry, admin: User) -> None:
    product_id = click.prompt("Product ID to update", type=int)
    price = click.prompt("New price")
    stock = click.prompt("New stock", type=int)
    product = shop.update_product(admin, product_id, price, stock)
    click.echo(f"Updated: {product.describe()}")


def _remove_product(shop: ShopRegistry, admin: User) -> None:
    product_id = click.prompt("Product ID to remove", type=int)
    product = shop.remove_product(admin, product_id)
    click.echo(f"Product #{product_id} '{product.name}' removed")


_ACTIONS = {
    "1": _add_product,
    "2": _update_product,
    "3": _remove_product,
}


def manage_menu(shop: ShopRegistry, admin: User) -> None:
    while True:
        click.echo()
        click.echo("=== Menu Management ===")
        click.echo("1. Add Product")
        click.echo("2. Update Product")
        click.echo("3. Remove Product")
        click.echo("4. Back")
        choice = click.prompt("Choose an option").strip()

        if choice == "4":
            return
        action = _ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid choice!")
            continue

        try:
            action(shop, admin)
        except DomainException as exc:
            click.echo(f"Error: {exc}")
        echo_menu(shop)
