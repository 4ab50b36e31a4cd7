"""
/start and /menu commands - Welcome message and main menu
"""

import logging
from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ContextTypes

from barbershop.config import get_config

logger = logging.getLogger(__name__)


def main_menu_markup() -> InlineKeyboardMarkup:
    """Main actions keyboard"""
    keyboard = [
        [InlineKeyboardButton("➕ Yeni Kayıt", callback_data="new_record")],
        [InlineKeyboardButton("📋 Günlük Kayıtlar", callback_data="records")],
        [InlineKeyboardButton("📄 PDF İndir", callback_data="export")],
    ]
    return InlineKeyboardMarkup(keyboard)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle the /start command"""
    config = get_config()
    logger.info(f"User {update.effective_user.id} started the bot")

    welcome_msg = (
        f"💈 <b>{config.shop_title}</b>\n\n"
        "Hizmet kayıtlarını buradan girebilirsiniz.\n\n"
        "• Yeni kayıt: /new\n"
        "• Günlük kayıtlar: /records\n"
        "• PDF rapor: /export\n"
        "• Yardım: /help"
    )

    await update.message.reply_text(
        welcome_msg, reply_markup=main_menu_markup(), parse_mode="HTML"
    )


async def menu_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Show main menu with action buttons"""
    await update.message.reply_text(
        "🏠 <b>Ana Menü</b>\n\nBir işlem seçin:",
        reply_markup=main_menu_markup(),
        parse_mode="HTML",
    )


async def show_main_menu(query) -> None:
    """Show main menu as inline message"""
    await query.edit_message_text(
        "🏠 <b>Ana Menü</b>\n\nBir işlem seçin:",
        reply_markup=main_menu_markup(),
        parse_mode="HTML",
    )
