"""
Button callback handlers for Telegram inline keyboards.
Handles menu navigation, barber filter changes, export and record clearing.
Form buttons (form_*, new_record) belong to the /new conversation.
"""

import logging
from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ContextTypes

from barbershop.bot_state import get_store, set_selection
from barbershop.commands.export import send_report
from barbershop.commands.menu import show_main_menu
from barbershop.commands.records import show_records_inline
from barbershop.config import get_config
from barbershop.models import ALL_BARBERS

logger = logging.getLogger(__name__)

FORM_EXPIRED_TEXT = "⌛ Bu form artık geçerli değil. Yeni kayıt için /new kullanın."


async def handle_filter(query, context: ContextTypes.DEFAULT_TYPE) -> None:
    """filter_all or filter_<barber index>"""
    value = query.data[len("filter_"):]
    if value == "all":
        selection = ALL_BARBERS
    else:
        barbers = get_config().barbers
        index = int(value) if value.isdigit() else len(barbers)
        if index >= len(barbers):
            logger.warning(f"Unknown barber index in callback: {query.data}")
            return
        selection = barbers[index]

    set_selection(context, selection)
    await show_records_inline(query, context)


async def handle_clear(query, context: ContextTypes.DEFAULT_TYPE, confirmed: bool) -> None:
    """Answer to the clear prompt shown after export"""
    keyboard = [[InlineKeyboardButton("🏠 Ana Menü", callback_data="main_menu")]]
    reply_markup = InlineKeyboardMarkup(keyboard)

    if not confirmed:
        await query.edit_message_text("Kayıtlar korundu.", reply_markup=reply_markup)
        return

    store = get_store(context)
    store.clear()
    logger.info(f"User {query.from_user.id} cleared all records after export")
    await query.edit_message_text("🧹 Tüm kayıtlar temizlendi.", reply_markup=reply_markup)


async def button_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Dispatch inline button presses"""
    query = update.callback_query
    await query.answer()

    data = query.data

    if data == "main_menu":
        await show_main_menu(query)
    elif data == "records":
        await show_records_inline(query, context)
    elif data.startswith("filter_"):
        await handle_filter(query, context)
    elif data == "export":
        await send_report(query.message, context)
    elif data == "clear_yes":
        await handle_clear(query, context, confirmed=True)
    elif data == "clear_no":
        await handle_clear(query, context, confirmed=False)
    elif data.startswith("form_"):
        # Button from a form whose conversation already ended
        await query.edit_message_text(FORM_EXPIRED_TEXT)
    else:
        logger.warning(f"Unhandled callback data: {data}")
