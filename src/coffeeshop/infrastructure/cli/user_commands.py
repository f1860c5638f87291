"""Interactive prompts for user management (administrators)."""

from __future__ import annotations

import click

from coffeeshop.application.shop_registry import ShopRegistry
from coffeeshop.domain.exceptions import DomainException
from coffeeshop.domain.model.user import Role, User

_ROLE_CHOICE = click.Choice([r.value for r in Role], case_sensitive=False)


def echo_users(shop: ShopRegistry, admin: User) -> None:
    click.echo(f"{'ID':<6} {'Username':<20} {'Role':<10} {'Points':>6}")
    click.echo("-" * 45)
    for user in shop.list_users(admin):
        click.echo(
            f"{user.id:<6} {user.username:<20} {user.role.value:<10} {user.loyalty_points:>6}"
        )


def _add_user(shop: ShopRegistry, admin: User) -> None:
    username = click.prompt("Username")
    password = click.prompt("Password", hide_input=True, confirmation_prompt=True)
    role = click.prompt("Role", type=_ROLE_CHOICE, default=Role.CUSTOMER.value)
    user = shop.add_user(admin, username, password, role)
    click.echo(f"User #{user.id} '{user.username}' added as {user.role.value}")


def _remove_user(shop: ShopRegistry, admin: User) -> None:
    user_id = click.prompt("User ID to remove", type=int)
    if shop.remove_user(admin, user_id):
        click.echo(f"User #{user_id} removed")
    else:
        click.echo("Administrators cannot be removed.")


def _change_role(shop: ShopRegistry, admin: User) -> None:
    user_id = click.prompt("User ID", type=int)
    role = click.prompt("New role", type=_ROLE_CHOICE)
    user = shop.change_role(admin, user_id, role)
    click.echo(f"'{user.username}' is now {user.role.value}")


_ACTIONS = {
    "1": _add_user,
    "2": _remove_user,
    "3": _change_role,
}


def manage_users(shop: ShopRegistry, admin: User) -> None:
    while True:
        click.echo()
        click.echo("=== User Management ===")
        echo_users(shop, admin)
        click.echo("1. Add User")
        click.echo("2. Remove User")
        click.echo("3. Change Role")
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
