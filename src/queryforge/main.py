"""
QueryForge - Command line entry point

Manages saved queries in the configuration database without a UI.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import AppSettings
from .config.i18n import i18n_manager, t
from .constants import OBJECT_ID, format_query_help
from .core import QueryStore, YamlSchemaProvider
from .database import ConfigDatabase
from .errors import QueryForgeError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="queryforge",
        description="Saved query manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  queryforge list
  queryforge add '{"score": {"$gt": 10}}' --search-key username
  queryforge delete 3f2a
  queryforge fields GameScore
  queryforge help
        """,
    )
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Configuration directory (default: $QUERYFORGE_CONFIG_DIR or _AppConfig)")
    parser.add_argument("--lang", default=None, help="Message language (e.g. en, fr)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List saved queries")

    add = sub.add_parser("add", help="Save a query")
    add.add_argument("constraint", help="Constraint string, stored verbatim")
    add.add_argument("--search-key", default=OBJECT_ID, help=f"Search key (default: {OBJECT_ID})")

    delete = sub.add_parser("delete", help="Delete a saved query")
    delete.add_argument("query_id", help="Saved query id or unique id prefix")

    fields = sub.add_parser("fields", help="List the fields of a class")
    fields.add_argument("class_name")
    fields.add_argument("--search-key", default=OBJECT_ID, help="Mark this field as the search key")

    sub.add_parser("help", help="Show the query operators")
    return parser


def _print_queries(store: QueryStore):
    print(t("queries.section_saved_queries"))
    if not len(store):
        print(f"  {t('queries.no_saved_queries')}")
        return
    for record in store:
        print(f"  {record.id[:8]}  {record.constraint_text}")
        print(f"            {t('queries.search_key_label', key=record.search_key)}")


def _run(args: argparse.Namespace, settings: AppSettings) -> int:
    if args.command == "help":
        print(format_query_help())
        return 0

    if args.command == "fields":
        schema = YamlSchemaProvider(settings.schema_path).get_schema(args.class_name)
        print(t("queries.section_search_key"))
        for name in schema.field_names:
            mark = "x" if name == args.search_key and name != OBJECT_ID else " "
            print(f"  [{mark}] {name}")
        return 0

    with ConfigDatabase(settings.db_path) as db:
        settings.apply_preferences(db.preferences)
        if args.lang:
            db.preferences.set("language", args.lang)
            settings.language = args.lang
        i18n_manager.set_language(settings.language)

        store = QueryStore(db.saved_queries)

        if args.command == "list":
            _print_queries(store)
        elif args.command == "add":
            record = store.add(args.constraint, args.search_key)
            print(f"{t('queries.query_added')}: {record.id}")
        elif args.command == "delete":
            try:
                record = store.find(args.query_id)
            except KeyError:
                print(f"No single saved query matches '{args.query_id}'", file=sys.stderr)
                return 1
            store.delete(record)
            print(t("queries.query_deleted"))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the queryforge command."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = AppSettings.load(args.config_dir)
    try:
        return _run(args, settings)
    except QueryForgeError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
