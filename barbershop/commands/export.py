"""
/export command - PDF revenue report for the current barber filter
"""

import logging
from telegram import Message, Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ContextTypes

from barbershop.bot_state import (
    get_formatter,
    get_renderer,
    get_selection,
    get_store,
    local_now,
)
from barbershop.config import get_config
from barbershop.errors import EmptyReportRequest, ExportError
from barbershop.services.report_service import export_report

logger = logging.getLogger(__name__)

NOTHING_TO_EXPORT_TEXT = "⚠️ İndirilecek kayıt bulunmamaktadır."
EXPORT_FAILED_TEXT = "❌ PDF oluşturulurken bir hata oluştu."
CLEAR_PROMPT_TEXT = "PDF indirildi. Kayıtları temizlemek istiyor musunuz?"


def clear_confirm_markup() -> InlineKeyboardMarkup:
    keyboard = [
        [
            InlineKeyboardButton("🧹 Evet, temizle", callback_data="clear_yes"),
            InlineKeyboardButton("Hayır", callback_data="clear_no"),
        ]
    ]
    return InlineKeyboardMarkup(keyboard)


async def send_report(message: Message, context: ContextTypes.DEFAULT_TYPE) -> bool:
    """
    Export, send the PDF to the chat and ask whether to clear records.

    Returns:
        True if a document was sent
    """
    selection = get_selection(context)

    try:
        path = export_report(
            get_store(context),
            selection,
            get_formatter(context),
            get_renderer(context),
            get_config().report_dir,
            today=local_now().date(),
        )
    except EmptyReportRequest:
        await message.reply_text(NOTHING_TO_EXPORT_TEXT)
        return False
    except ExportError as e:
        logger.error(f"PDF generation error: {e}")
        await message.reply_text(EXPORT_FAILED_TEXT)
        return False

    with path.open("rb") as document:
        await message.reply_document(
            document=document,
            filename=path.name,
            caption="✅ PDF başarıyla indirildi.",
        )

    await message.reply_text(CLEAR_PROMPT_TEXT, reply_markup=clear_confirm_markup())
    return True


async def export_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /export"""
    await send_report(update.message, context)
