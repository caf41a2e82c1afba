"""Sample consumer that drains the Jakamo sales order queue to disk.

Usage:
    jakamo-poll --output-dir orders/

Each order is written to ``<order_number>.xml``, all proposed changes are
confirmed and the order is removed from the queue. Polling stops when the
queue reports no more messages or an error occurs.

Environment Variables: see ``JakamoTransport.from_env`` and
``setup_logging``.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import JakamoClientError
from .sales_orders import SalesOrderClient
from .transport import JakamoTransport
from .utils.logging import get_logger, setup_logging

logger = get_logger("poller")


@dataclass
class PollSummary:
    written: List[Path] = field(default_factory=list)
    confirmed: int = 0
    removed: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _file_stem(order_number: Optional[str], count: int) -> str:
    """File name for an order, confined to a single path component.

    The order number comes from a response header, so separators and
    relative parts such as ".." are removed.
    """
    stem = (order_number or "").replace("\\", "/")
    stem = stem.split("/")[-1].strip()
    if stem in {"", ".", ".."}:
        return f"order-{count}"
    return stem


async def poll_sales_orders(
    client: SalesOrderClient,
    output_dir: Path,
    *,
    confirm: bool = True,
    remove: bool = True,
    max_orders: Optional[int] = None,
) -> PollSummary:
    """Fetch sales orders until the queue is empty and write them to output_dir.

    Without ``remove`` the queue head never changes, so only one order is
    fetched in that mode.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    summary = PollSummary()
    if not remove:
        max_orders = 1 if max_orders is None else min(max_orders, 1)

    count = 0
    while max_orders is None or count < max_orders:
        result = await client.get_sales_order()
        if result.is_not_found:
            logger.info("No more messages in queue.")
            break
        if result.is_error:
            summary.errors.extend(result.errors)
            logger.error("Error retrieving sales order: %s", "; ".join(result.errors))
            break

        order = result.value
        count += 1
        logger.info(
            "Order number: %s confirmation=%s acknowledgement=%s",
            order.order_number, order.confirmation_uri, order.acknowledgement_uri,
        )

        path = output_dir / f"{_file_stem(order.order_number, count)}.xml"
        path.write_bytes(order.xml_body.read())
        summary.written.append(path)
        logger.info("Wrote %s", path)

        if confirm:
            confirmed = await client.confirm_all_changes_for_sales_order(
                order.confirmation_uri or ""
            )
            if confirmed:
                summary.confirmed += 1
                logger.info("Confirmed order at %s", order.confirmation_uri)
            else:
                summary.errors.extend(confirmed.errors)
                logger.warning("Error confirming order: %s", "; ".join(confirmed.errors))

        if remove:
            removed = await client.remove_sales_order_from_queue(
                order.acknowledgement_uri or ""
            )
            if not removed:
                # Removal failed: the same order would come back forever
                summary.errors.extend(removed.errors)
                logger.error("Error removing the order: %s", "; ".join(removed.errors))
                break
            summary.removed += 1
            logger.info("Removed %s from queue", order.order_number)

    return summary


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jakamo-poll",
        description="Drain the Jakamo sales order queue into XML files.",
    )
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    parser.add_argument("--no-confirm", action="store_true", help="Do not confirm order changes")
    parser.add_argument("--no-remove", action="store_true", help="Leave orders in the queue")
    parser.add_argument("--max-orders", type=int, default=None)
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> PollSummary:
    async with JakamoTransport.from_env() as transport:
        client = SalesOrderClient(transport)
        return await poll_sales_orders(
            client,
            args.output_dir,
            confirm=not args.no_confirm,
            remove=not args.no_remove,
            max_orders=args.max_orders,
        )


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging()
    try:
        summary = asyncio.run(_run(args))
    except JakamoClientError as e:
        logger.error("%s", e)
        return 2
    logger.info(
        "Wrote %d order(s), confirmed %d, removed %d",
        len(summary.written), summary.confirmed, summary.removed,
    )
    return 0 if summary.ok else 1


if __name__ == "__main__":
    sys.exit(main())
