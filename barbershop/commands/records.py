"""
/records command - Day's records table with barber filter and total
"""

import html
import logging
from typing import Sequence
from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.constants import MessageLimit
from telegram.ext import ContextTypes

from barbershop.aggregates import filtered, filtered_total, total_label
from barbershop.bot_state import get_selection, get_store
from barbershop.config import get_config
from barbershop.models import ALL_BARBERS, ServiceRecord

logger = logging.getLogger(__name__)

EMPTY_RECORDS_TEXT = "Henüz kayıt yok. /new komutunu kullanarak hizmet ekleyin."
MAX_TABLE_ROWS = 50


def selection_title(selection: str) -> str:
    return "Tüm Berberler" if selection == ALL_BARBERS else selection


def format_records_table(records: Sequence[ServiceRecord]) -> str:
    """Fixed-width table of records"""
    rows = [("Berber", "Saat", "Hizmet", "Fiyat")] + [
        (r.barber, r.time, r.service, f"{r.price}₺") for r in records
    ]
    widths = [max(len(row[col]) for row in rows) for col in range(3)]
    lines = []
    for row in rows:
        left = "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row[:3]))
        lines.append(f"{left}  {row[3]}")
    return "\n".join(lines)


def format_records_message(records: Sequence[ServiceRecord], selection: str) -> str:
    """Records view text for a filter selection"""
    header = f"📋 <b>Günlük Kayıtlar</b> · {html.escape(selection_title(selection))}\n\n"

    if not records:
        return header + EMPTY_RECORDS_TEXT

    subset = filtered(records, selection)
    total_line = (
        f"<b>{html.escape(total_label(selection))} "
        f"{filtered_total(records, selection)}₺</b>"
    )

    # Only the latest rows fit in one message; the total covers the full subset
    shown = subset[-MAX_TABLE_ROWS:]
    while True:
        omitted = len(subset) - len(shown)
        note = f"\n… {omitted} önceki kayıt gösterilmiyor (tamamı PDF raporunda)" if omitted else ""
        text = (
            header
            + f"<pre>{html.escape(format_records_table(shown))}</pre>"
            + note
            + "\n\n"
            + total_line
        )
        if len(text) <= MessageLimit.MAX_TEXT_LENGTH or not shown:
            return text
        shown = shown[1:]


def records_markup(selection: str) -> InlineKeyboardMarkup:
    """Filter buttons plus export/new actions"""
    options = [ALL_BARBERS] + list(get_config().barbers)
    filter_buttons = []
    for index, option in enumerate(options):
        label = selection_title(option)
        if option == selection:
            label = f"✓ {label}"
        callback = "filter_all" if option == ALL_BARBERS else f"filter_{index - 1}"
        filter_buttons.append(InlineKeyboardButton(label, callback_data=callback))

    keyboard = [
        filter_buttons[:2],
        filter_buttons[2:],
        [
            InlineKeyboardButton("📄 PDF İndir", callback_data="export"),
            InlineKeyboardButton("➕ Yeni Kayıt", callback_data="new_record"),
        ],
        [InlineKeyboardButton("🏠 Ana Menü", callback_data="main_menu")],
    ]
    return InlineKeyboardMarkup([row for row in keyboard if row])


async def records_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /records"""
    selection = get_selection(context)
    store = get_store(context)

    await update.message.reply_text(
        format_records_message(store.records, selection),
        reply_markup=records_markup(selection),
        parse_mode="HTML",
    )


async def show_records_inline(query, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Records view as inline message"""
    selection = get_selection(context)
    store = get_store(context)

    await query.edit_message_text(
        format_records_message(store.records, selection),
        reply_markup=records_markup(selection),
        parse_mode="HTML",
    )
