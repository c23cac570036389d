"""JSON payload encoding for the trades stored with each local day."""

import json
import logging
from decimal import Decimal, InvalidOperation

from tradejournal.domain.models import Market, Money, Trade, TradeAction

logger = logging.getLogger(__name__)

EMPTY_PAYLOAD = '{"trades": []}'


def encode_trades(trades: list[Trade]) -> str:
    """Serialize trades; prices are decimal strings so they stay exact."""
    return json.dumps({
        "trades": [
            {
                "id": t.id,
                "symbol": t.symbol,
                "action": t.action.value,
                "market": t.market.value,
                "quantity": t.quantity,
                "price": str(t.price.amount),
            }
            for t in trades
        ]
    })


def decode_trades(payload: str) -> list[Trade]:
    """
    Deserialize trades.

    A corrupt payload yields an empty list and unreadable entries are
    skipped, so one bad row never blocks reading the rest of the history.
    """
    try:
        data = json.loads(payload or EMPTY_PAYLOAD)
    except json.JSONDecodeError:
        logger.warning("Unreadable trade payload; treating as empty")
        return []

    trades = []
    for item in data.get("trades", []) if isinstance(data, dict) else []:
        try:
            kwargs = dict(
                symbol=item["symbol"],
                action=TradeAction(item["action"]),
                market=Market(item.get("market", Market.TSE.value)),
                quantity=int(item["quantity"]),
                price=Money(Decimal(str(item["price"]))),
            )
            if item.get("id"):
                kwargs["id"] = item["id"]
            trades.append(Trade(**kwargs))
        except (KeyError, TypeError, ValueError, InvalidOperation):
            logger.warning(f"Skipping unreadable trade entry: {item!r}")
    return trades
