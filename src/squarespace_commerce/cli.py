"""Command-line interface for browsing a Squarespace Commerce store."""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install squarespace-commerce[cli]' to enable this command."
    ) from exc

from . import CommerceClient
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .exceptions import APIError, CommerceError
from .models.base import CommerceModel
from .query import QueryParams

app = typer.Typer(help="Squarespace Commerce store CLI.", no_args_is_help=True)

products_app = typer.Typer(help="Product and store page operations.")
inventory_app = typer.Typer(help="Inventory operations.")
orders_app = typer.Typer(help="Order operations.")
profiles_app = typer.Typer(help="Customer profile operations.")
transactions_app = typer.Typer(help="Transaction document operations.")
webhooks_app = typer.Typer(help="Webhook subscription operations.")
app.add_typer(products_app, name="products")
app.add_typer(inventory_app, name="inventory")
app.add_typer(orders_app, name="orders")
app.add_typer(profiles_app, name="profiles")
app.add_typer(transactions_app, name="transactions")
app.add_typer(webhooks_app, name="webhooks")


def _build_client(
    api_key: str,
    base_url: str | None,
    user_agent: str | None,
    timeout: float | None,
    verify_ssl: bool,
) -> CommerceClient:
    if not api_key.strip():
        raise typer.BadParameter("--api-key must not be empty.")
    return CommerceClient(
        api_key=api_key,
        base_url=base_url,
        user_agent=user_agent,
        timeout=timeout,
        verify_ssl=verify_ssl,
    )


def _to_rows(payload: Any) -> Any:
    if isinstance(payload, CommerceModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, list):
        return [_to_rows(item) for item in payload]
    return payload


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(_to_rows(payload), indent=2))


console = Console(force_terminal=False, color_system=None)


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    ordered_rows = list(rows)
    if view.sort_key:
        ordered_rows.sort(key=view.sort_key)
    for row in ordered_rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _present_output(payload: Any, *, view_id: str | None, json_output: bool) -> None:
    if json_output or view_id is None:
        _echo_json(payload)
        return
    view = CLI_TABLE_VIEWS.get(view_id)
    rows = _to_rows(payload)
    if not view or not isinstance(rows, list) or not rows:
        _echo_json(payload)
        return
    _render_rich_table(view, rows)


def _present_page(
    items: Sequence[Any], pagination: Any, *, view_id: str, json_output: bool
) -> None:
    _present_output(list(items), view_id=view_id, json_output=json_output)
    if pagination.has_next_page and not json_output:
        typer.echo(f"Next page cursor: {pagination.next_page_cursor}")


def _handle_error(exc: CommerceError) -> None:
    if exc.status_code is not None:
        message = f"Request failed (status {exc.status_code}): {exc}"
    else:
        message = f"Request failed: {exc}"
    if isinstance(exc, APIError) and exc.type:
        message += f"\nError type: {exc.type}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    return {
        "api_key": typer.Option(
            ...,
            "--api-key",
            "-k",
            envvar="SQUARESPACE_API_KEY",
            help="Commerce API key or OAuth access token.",
        ),
        "base_url": typer.Option(
            None,
            "--base-url",
            envvar="SQUARESPACE_BASE_URL",
            help="Override the API host (for example a local test server).",
        ),
        "user_agent": typer.Option(
            None,
            "--user-agent",
            envvar="SQUARESPACE_USER_AGENT",
            help="User-Agent header sent with each request.",
        ),
        "verify_ssl": typer.Option(
            True,
            "--verify/--no-verify",
            help="Enable or disable TLS certificate verification.",
            show_default=True,
        ),
        "timeout": typer.Option(None, help="Request timeout (seconds)."),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
        "cursor": typer.Option(None, "--cursor", help="Pagination cursor from a previous page."),
        "modified_after": typer.Option(
            None, "--modified-after", help="ISO 8601 UTC start of the modification window."
        ),
        "modified_before": typer.Option(
            None, "--modified-before", help="ISO 8601 UTC end of the modification window."
        ),
    }


_SHARED_OPTIONS = _shared_options()


@products_app.command("store-pages")
def products_store_pages(
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    cursor: str | None = _SHARED_OPTIONS["cursor"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List store pages."""

    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            page = client.products.list_store_pages(QueryParams(cursor=cursor))
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_page(
        page.store_pages, page.pagination, view_id="products.store_pages", json_output=output_json
    )


@products_app.command("list")
def products_list(
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    cursor: str | None = _SHARED_OPTIONS["cursor"],
    modified_after: str | None = _SHARED_OPTIONS["modified_after"],
    modified_before: str | None = _SHARED_OPTIONS["modified_before"],
    product_type: str | None = typer.Option(
        None, "--type", help="PHYSICAL, DIGITAL or both comma-separated."
    ),
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List products."""

    params = QueryParams(
        cursor=cursor,
        modified_after=modified_after,
        modified_before=modified_before,
        type=product_type,
    )
    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            page = client.products.list(params)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_page(page.products, page.pagination, view_id="products.list", json_output=output_json)


@products_app.command("get")
def products_get(
    product_ids: list[str] = typer.Argument(..., help="Product identifiers (up to 50)."),
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """Show specific products."""

    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            result = client.products.get(product_ids)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_output(result.products, view_id="products.list", json_output=output_json)


@inventory_app.command("list")
def inventory_list(
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    cursor: str | None = _SHARED_OPTIONS["cursor"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List stock levels."""

    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            page = client.inventory.list(QueryParams(cursor=cursor))
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_page(page.inventory, page.pagination, view_id="inventory.list", json_output=output_json)


@inventory_app.command("get")
def inventory_get(
    variant_ids: list[str] = typer.Argument(..., help="Variant identifiers (up to 50)."),
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """Show stock for specific variants."""

    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            result = client.inventory.get(variant_ids)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_output(result.inventory, view_id="inventory.list", json_output=output_json)


@orders_app.command("list")
def orders_list(
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    cursor: str | None = _SHARED_OPTIONS["cursor"],
    modified_after: str | None = _SHARED_OPTIONS["modified_after"],
    modified_before: str | None = _SHARED_OPTIONS["modified_before"],
    status: str | None = typer.Option(
        None, "--status", help="Fulfillment status filter (PENDING, FULFILLED, CANCELED)."
    ),
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List orders."""

    params = QueryParams(
        cursor=cursor,
        modified_after=modified_after,
        modified_before=modified_before,
        status=status,
    )
    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            page = client.orders.list(params)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_page(page.result, page.pagination, view_id="orders.list", json_output=output_json)


@orders_app.command("get")
def orders_get(
    order_id: str = typer.Argument(..., help="Order identifier."),
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
) -> None:
    """Show a single order as JSON."""

    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            order = client.orders.get(order_id)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _echo_json(order)


@profiles_app.command("list")
def profiles_list(
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    cursor: str | None = _SHARED_OPTIONS["cursor"],
    filter_: str | None = typer.Option(
        None, "--filter", help="Profile filter, e.g. 'isCustomer,true'."
    ),
    sort_direction: str | None = typer.Option(None, "--sort-direction", help="asc or desc."),
    sort_field: str | None = typer.Option(None, "--sort-field", help="Field to sort by."),
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List customer profiles."""

    params = QueryParams(
        cursor=cursor,
        filter=filter_,
        sort_direction=sort_direction,
        sort_field=sort_field,
    )
    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            page = client.profiles.list(params)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_page(page.profiles, page.pagination, view_id="profiles.list", json_output=output_json)


@profiles_app.command("get")
def profiles_get(
    profile_ids: list[str] = typer.Argument(..., help="Profile identifiers (up to 50)."),
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """Show specific customer profiles."""

    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            result = client.profiles.get(profile_ids)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_output(result.profiles, view_id="profiles.list", json_output=output_json)


@transactions_app.command("list")
def transactions_list(
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    cursor: str | None = _SHARED_OPTIONS["cursor"],
    modified_after: str | None = _SHARED_OPTIONS["modified_after"],
    modified_before: str | None = _SHARED_OPTIONS["modified_before"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List transaction documents."""

    params = QueryParams(
        cursor=cursor,
        modified_after=modified_after,
        modified_before=modified_before,
    )
    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            page = client.transactions.list(params)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_page(
        page.documents, page.pagination, view_id="transactions.list", json_output=output_json
    )


@webhooks_app.command("list")
def webhooks_list(
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List webhook subscriptions."""

    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            result = client.webhooks.list()
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_output(result.webhook_subscriptions, view_id="webhooks.list", json_output=output_json)



@transactions_app.command("get")
def transactions_get(
    transaction_ids: list[str] = typer.Argument(..., help="Transaction identifiers (up to 50)."),
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """Show specific transaction documents."""

    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            result = client.transactions.get(transaction_ids)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _present_output(result.documents, view_id="transactions.list", json_output=output_json)


@webhooks_app.command("get")
def webhooks_get(
    subscription_id: str = typer.Argument(..., help="Webhook subscription identifier."),
    api_key: str = _SHARED_OPTIONS["api_key"],
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    user_agent: str | None = _SHARED_OPTIONS["user_agent"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float | None = _SHARED_OPTIONS["timeout"],
) -> None:
    """Show a single webhook subscription as JSON."""

    with _build_client(api_key, base_url, user_agent, timeout, verify_ssl) as client:
        try:
            subscription = client.webhooks.get(subscription_id)
        except CommerceError as exc:
            _handle_error(exc)
            return

    _echo_json(subscription)
