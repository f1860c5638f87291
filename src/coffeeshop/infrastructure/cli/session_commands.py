"""Interactive session: login, ordering and order history."""

from __future__ import annotations

import click

from coffeeshop.application.shop_registry import ShopRegistry
from coffeeshop.domain.exceptions import DomainException
from coffeeshop.domain.model.user import User
from coffeeshop.infrastructure.bootstrap import build_shop
from coffeeshop.infrastructure.cli.menu_commands import echo_menu, manage_menu
from coffeeshop.infrastructure.cli.user_commands import manage_users


def _place_order(shop: ShopRegistry, user: User) -> None:
    order = shop.start_order(user)
    while True:
        click.echo()
        echo_menu(shop)
        raw = click.prompt("Product ID to add (or 'done')").strip()
        if raw.lower() == "done":
            break
        try:
            product_id = int(raw)
        except ValueError:
            click.echo("Invalid input! Please enter a valid product ID.")
            continue
        quantity = click.prompt("Quantity", type=click.IntRange(min=1), default=1)

        try:
            product = shop.add_to_order(order, product_id, quantity)
        except DomainException as exc:
            click.echo(f"Error: {exc}")
            continue
        click.echo(f"{quantity} x {product.name} added to order!")

    receipt = shop.process_order(order, user)
    click.echo()
    click.echo(receipt.order.render())
    if receipt.loyalty_notice and receipt.points_earned:
        click.echo(
            f"You earned {receipt.points_earned} loyalty point(s)! "
            f"Balance: {receipt.points_balance}"
        )


def _view_history(shop: ShopRegistry, user: User) -> None:
    orders = shop.order_history(user)
    click.echo("Order History:")
    if not orders:
        click.echo("  No orders yet.")
        return
    for order in orders:
        click.echo()
        click.echo(order.render())


def _change_password(shop: ShopRegistry, user: User) -> None:
    new_password = click.prompt("New password", hide_input=True, confirmation_prompt=True)
    shop.change_password(user, user.id, new_password)
    click.echo("Password updated.")


def _user_session(shop: ShopRegistry, user: User) -> None:
    while True:
        click.echo()
        click.echo(f"Logged in as: {user.username} ({user.role.value})")
        click.echo("1. Place Order")
        click.echo("2. View Order History")
        click.echo("3. View Menu")
        click.echo("4. Change Password")
        if user.is_admin:
            click.echo("5. Manage Menu")
            click.echo("6. Manage Users")
        click.echo("0. Logout")
        choice = click.prompt("Choose an option").strip()

        try:
            if choice == "1":
                _place_order(shop, user)
            elif choice == "2":
                _view_history(shop, user)
            elif choice == "3":
                echo_menu(shop)
            elif choice == "4":
                _change_password(shop, user)
            elif choice == "5" and user.is_admin:
                manage_menu(shop, user)
            elif choice == "6" and user.is_admin:
                manage_users(shop, user)
            elif choice == "0":
                return
            else:
                click.echo("Invalid choice!")
        except DomainException as exc:
            click.echo(f"Error: {exc}")


def _login(shop: ShopRegistry) -> None:
    click.echo("=== Login ===")
    username = click.prompt("Username")
    password = click.prompt("Password", hide_input=True)

    user = shop.authenticate_user(username, password)
    if user is None:
        click.echo("Invalid credentials!")
        return
    _user_session(shop, user)


@click.command("session")
def session() -> None:
    """Start an interactive session against a freshly seeded shop."""
    shop = build_shop()
    while True:
        click.echo()
        click.echo("=== Coffee Shop Management System ===")
        click.echo("1. Login")
        click.echo("2. Exit")
        choice = click.prompt("Choose an option").strip()

        if choice == "1":
            _login(shop)
        elif choice == "2":
            click.echo("Goodbye!")
            return
        else:
            click.echo("Invalid choice!")
