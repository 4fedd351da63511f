"""Command line entry point for the shoe list.

Usage:
    # Show the list
    python -m shoe_inventory list

    # Delete a shoe, asking for confirmation
    python -m shoe_inventory delete 3

    # Add or edit a shoe against another backend
    python -m shoe_inventory --base-url https://api.example.com add --name "Air" --code A1 --price 100 --size 42
    python -m shoe_inventory edit 3 --price 120
"""

import argparse
import asyncio
import sys

from shoe_inventory import __version__
from shoe_inventory.config import LOG_LEVELS, settings
from shoe_inventory.console import ConsoleHost
from shoe_inventory.core.shoe_list_controller import ShoeListController
from shoe_inventory.infra.logging import get_logger, setup_logging
from shoe_inventory.schemas.product import ProductDraft
from shoe_inventory.services.shoe_service import ShoeService, ShoeServiceError

logger = get_logger(__name__)


def non_negative_price(value: str) -> float:
    """argparse type for prices entered on the command line."""
    try:
        price = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid price: {value!r}") from None
    if price < 0:
        raise argparse.ArgumentTypeError(f"price must not be negative: {value}")
    return price


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="shoe-inventory",
        description="List, add, edit and delete shoes on the remote shoe service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--base-url",
        default=None,
        help=f"Shoe service base URL (default: {settings.shoe_api_url})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Log level (default: {settings.log_level})",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="Show all shoes")
    commands.add_parser("refresh", help="Load, then pull-to-refresh the list")

    delete = commands.add_parser("delete", help="Delete a shoe after confirmation")
    delete.add_argument("id", help="Shoe id")
    delete.add_argument("-y", "--yes", action="store_true", help="Confirm without asking")

    add = commands.add_parser("add", help="Create a shoe")
    add.add_argument("--name", required=True)
    add.add_argument("--code", required=True)
    add.add_argument("--price", required=True, type=non_negative_price)
    add.add_argument("--size", required=True)

    edit = commands.add_parser("edit", help="Update fields of a shoe")
    edit.add_argument("id", help="Shoe id")
    edit.add_argument("--name")
    edit.add_argument("--code")
    edit.add_argument("--price", type=non_negative_price)
    edit.add_argument("--size")

    return parser.parse_args(argv)


def _price(value: float) -> int | float:
    return int(value) if value.is_integer() else value


async def run(args: argparse.Namespace, host: ConsoleHost, service: ShoeService) -> int:
    """Execute one command. Returns the process exit code."""
    controller = ShoeListController(service=service, host=host)

    if args.command == "list":
        ok = await controller.on_screen_focus()
        host.render(controller.state)
        return 0 if ok else 1

    if args.command == "refresh":
        await controller.on_screen_focus()
        ok = await controller.refresh()
        host.render(controller.state)
        return 0 if ok else 1

    if args.command == "delete":
        if not await controller.on_screen_focus():
            return 1
        item = controller.state.find(args.id)
        if item is None:
            host.write(f"Không tìm thấy sản phẩm #{args.id}")
            return 1
        deleted = await controller.request_delete(item.id, item.name)
        host.render(controller.state)
        return 0 if deleted else 1

    if args.command == "add":
        controller.navigate_to_add()
        draft = ProductDraft(
            name=args.name,
            code=args.code,
            price=_price(args.price),
            size=args.size,
        )
        try:
            await service.create_shoe(draft)
        except ShoeServiceError as e:
            logger.error("Failed to create shoe", error=str(e))
            host.write(f"Lỗi: {e}")
            return 1
        ok = await controller.on_screen_focus()
        host.render(controller.state)
        return 0 if ok else 1

    if args.command == "edit":
        try:
            current = (await service.get_shoe(args.id)).data
        except ShoeServiceError as e:
            logger.error("Failed to fetch shoe", shoe_id=args.id, error=str(e))
            host.write(f"Lỗi: {e}")
            return 1
        controller.navigate_to_edit(current)

        changes = {
            key: value
            for key, value in {
                "name": args.name,
                "code": args.code,
                "price": _price(args.price) if args.price is not None else None,
                "size": args.size,
            }.items()
            if value is not None
        }
        draft = current.to_draft().model_copy(update=changes)
        try:
            await service.update_shoe(current.id, draft)
        except ShoeServiceError as e:
            logger.error("Failed to update shoe", shoe_id=current.id, error=str(e))
            host.write(f"Lỗi: {e}")
            return 1
        ok = await controller.on_screen_focus()
        host.render(controller.state)
        return 0 if ok else 1

    raise ValueError(f"Unknown command: {args.command}")


async def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    host = ConsoleHost(assume_yes=getattr(args, "yes", False))
    service = ShoeService(base_url=args.base_url)
    try:
        return await run(args, host, service)
    finally:
        await service.close()


def entrypoint() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    entrypoint()
