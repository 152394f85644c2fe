#!/usr/bin/env python3

import sys
from pathlib import Path

from rich.console import Console

from cli.render import print_view
from ingestion import get_ingestion_module
from logger import get_logger
from tools.category_table import category_columns
from tools.category_tree import child_depth
from tools.data_table import DataTable

logger = get_logger()


def _select_country(args, services):
    if getattr(args, "country", None):
        try:
            services.select_country(args.country)
        except ValueError as e:
            logger.error(str(e))
            sys.exit(1)
    return services.country


def _status_filter(value):
    if value is None:
        return None
    return value == "active"


def cmd_list(args, services, console=None):
    """List categories as an indented tree, or a filtered page."""
    country = _select_country(args, services)
    per_page = args.per_page or services.config.per_page

    rows, pagination = services.categories.listing(
        country.id,
        page=args.page,
        per_page=per_page,
        search=args.search,
        is_active=_status_filter(args.status),
    )

    table = DataTable(
        category_columns(services.labels, services.config.indent),
        labels=services.labels,
    )
    view = table.render(rows, pagination=pagination)
    print_view(console or Console(), view, title=f"Categories - {country.name}")


def cmd_stats(args, services):
    """Show category counters for a country."""
    country = _select_country(args, services)
    stats = services.categories.stats(country.id)

    logger.info(f"\nCategories for {country.name}:")
    logger.info("=" * 80)
    logger.info(f"Total categories: {stats.total}")
    logger.info(f"Active: {stats.active}")
    logger.info(f"Inactive: {stats.inactive}")
    logger.info(f"Total articles: {stats.articles}")
    logger.info(f"Top-level categories: {stats.roots}")


def cmd_show(args, services):
    """Show a category and the depth a new child of it would get."""
    country = _select_country(args, services)
    rows = services.categories.tree(country.id)
    category = next((row for row in rows if row.id == args.category_id), None)
    if category is None:
        logger.error(f"Category with ID {args.category_id} not found.")
        sys.exit(1)

    logger.info(f"ID: {category.id}")
    logger.info(f"Name: {category.name}")
    logger.info(f"Slug: {category.slug or '-'}")
    logger.info(f"Status: {'Active' if category.is_active else 'Inactive'}")
    logger.info(f"Articles: {category.news_count}")
    logger.info(f"Depth: {category.depth}")
    if category.parent_id:
        parent = services.categories.find(country.id, category.parent_id)
        parent_name = parent.name if parent else "Unknown"
        logger.info(f"Parent: {parent_name} (ID: {category.parent_id})")
    logger.info(f"Child depth: {child_depth(category.id, rows)}")


def cmd_toggle(args, services):
    """Toggle a category's active flag."""
    country = _select_country(args, services)
    result = services.categories.toggle(country.id, args.category_id)
    if not result.ok:
        logger.error(f"Error toggling category: {result.error}")
        sys.exit(1)

    category = result.value
    status = "active" if category.is_active else "inactive"
    logger.info(f"✓ Category '{category.name}' is now {status}.")


def cmd_delete(args, services):
    """Delete a category by ID."""
    country = _select_country(args, services)
    category = services.categories.find(country.id, args.category_id)
    if not category:
        logger.error(f"Category with ID {args.category_id} not found.")
        sys.exit(1)

    logger.info("\nCategory to delete:")
    logger.info(f"  ID: {category.id}")
    logger.info(f"  Name: {category.name}")

    confirm = (
        input("\nAre you sure you want to delete this category? (yes/no): ")
        .strip()
        .lower()
    )
    if confirm != "yes":
        logger.info("Deletion cancelled.")
        return

    result = services.categories.delete(country.id, args.category_id)
    if not result.ok:
        logger.error(f"Error deleting category: {result.error}")
        sys.exit(1)
    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def cmd_import(args, services):
    """Import a categories list response saved from the API."""
    country = _select_country(args, services)
    path = Path(args.file)
    if not path.exists():
        logger.error(f"File not found: {path}")
        sys.exit(1)

    module = get_ingestion_module("categories")
    with open(path, "r", encoding="utf-8") as f:
        try:
            categories, _ = module.ingest(f)
        except ValueError as e:
            logger.error(str(e))
            sys.exit(1)

    result = services.categories.replace_all(country.id, categories)
    if not result.ok:
        logger.error(f"Error saving categories: {result.error}")
        sys.exit(1)
    logger.info(f"✓ Imported {len(categories)} categories for {country.name}.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="List, inspect, toggle, delete, and import categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    def add_country(sub):
        sub.add_argument("--country", help="Country id or code (e.g. 1 or jo)")

    # categories list
    list_parser = categories_subparsers.add_parser(
        "list", help="List categories as a tree, or search them"
    )
    add_country(list_parser)
    list_parser.add_argument("--search", help="Filter by name or slug")
    list_parser.add_argument(
        "--status", choices=["active", "inactive"], help="Filter by status"
    )
    list_parser.add_argument("--page", type=int, default=1, help="Page of results")
    list_parser.add_argument("--per-page", type=int, help="Results per page")
    list_parser.set_defaults(func=cmd_list)

    # categories stats
    stats_parser = categories_subparsers.add_parser("stats", help="Show counters")
    add_country(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    # categories show
    show_parser = categories_subparsers.add_parser("show", help="Show one category")
    add_country(show_parser)
    show_parser.add_argument("category_id", type=int, help="ID of the category")
    show_parser.set_defaults(func=cmd_show)

    # categories toggle
    toggle_parser = categories_subparsers.add_parser(
        "toggle", help="Toggle a category's active flag"
    )
    add_country(toggle_parser)
    toggle_parser.add_argument("category_id", type=int, help="ID of the category")
    toggle_parser.set_defaults(func=cmd_toggle)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by ID"
    )
    add_country(delete_parser)
    delete_parser.add_argument(
        "category_id",
        type=int,
        help="ID of the category to delete",
    )
    delete_parser.set_defaults(func=cmd_delete)

    # categories import
    import_parser = categories_subparsers.add_parser(
        "import", help="Import a categories list response (JSON)"
    )
    add_country(import_parser)
    import_parser.add_argument("file", help="Path to the JSON response")
    import_parser.set_defaults(func=cmd_import)
