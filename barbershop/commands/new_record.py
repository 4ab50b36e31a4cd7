"""
/new conversation - Service entry form
Walks staff through barber, service and price selection, then saves the record.
"""

import html
import logging
from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import (
    ContextTypes,
    ConversationHandler,
    CallbackQueryHandler,
    CommandHandler,
    MessageHandler,
    filters,
)

from barbershop.bot_state import get_form, new_form, FORM_KEY
from barbershop.config import get_config
from barbershop.errors import InvalidPrice, MissingField
from barbershop.form import validate_price

logger = logging.getLogger(__name__)

# Conversation states
(
    CHOOSING_BARBER,
    CHOOSING_SERVICE,
    CHOOSING_PRICE,
    CONFIRMING,
) = range(4)

CANCEL_BUTTON = InlineKeyboardButton("❌ İptal", callback_data="form_cancel")

MISSING_FIELDS_TEXT = "⚠️ Lütfen tüm alanları doldurun."
INVALID_PRICE_TEXT = "⚠️ Lütfen geçerli bir fiyat girin (ör. 250 veya 150.5)."


def barber_keyboard() -> InlineKeyboardMarkup:
    keyboard = [
        [InlineKeyboardButton(name, callback_data=f"form_barber_{index}")]
        for index, name in enumerate(get_config().barbers)
    ]
    keyboard.append([CANCEL_BUTTON])
    return InlineKeyboardMarkup(keyboard)


def service_keyboard() -> InlineKeyboardMarkup:
    keyboard = [
        [InlineKeyboardButton(name, callback_data=f"form_service_{index}")]
        for index, name in enumerate(get_config().services)
    ]
    keyboard.append([CANCEL_BUTTON])
    return InlineKeyboardMarkup(keyboard)


def price_keyboard(tiers) -> InlineKeyboardMarkup:
    keyboard = [
        [
            InlineKeyboardButton(f"{price}₺", callback_data=f"form_price_{index}")
            for index, price in enumerate(tiers)
        ],
        [CANCEL_BUTTON],
    ]
    return InlineKeyboardMarkup(keyboard)


def confirm_keyboard() -> InlineKeyboardMarkup:
    keyboard = [
        [
            InlineKeyboardButton("💾 Kaydet", callback_data="form_save"),
            CANCEL_BUTTON,
        ]
    ]
    return InlineKeyboardMarkup(keyboard)


def format_form_summary(form) -> str:
    """Current selections as HTML"""
    return (
        f"💈 Berber: <b>{html.escape(form.barber or '-')}</b>\n"
        f"✂️ Hizmet: <b>{html.escape(form.service or '-')}</b>\n"
        f"💰 Fiyat: <b>{html.escape(form.price or '-')}₺</b>"
    )


def _index_from_callback(data: str) -> int:
    return int(data.rsplit("_", 1)[1])


async def start_new_record(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Entry point: /new command or 'new_record' button"""
    new_form(context)
    text = "📝 <b>Hizmet Giriş Formu</b>\n\nBerber seçin:"

    if update.callback_query:
        query = update.callback_query
        await query.answer()
        await query.edit_message_text(
            text, reply_markup=barber_keyboard(), parse_mode="HTML"
        )
    else:
        await update.message.reply_text(
            text, reply_markup=barber_keyboard(), parse_mode="HTML"
        )

    return CHOOSING_BARBER


async def barber_selected(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    query = update.callback_query
    await query.answer()

    barbers = get_config().barbers
    index = _index_from_callback(query.data)
    if index >= len(barbers):
        logger.warning(f"Unknown barber index in callback: {query.data}")
        return CHOOSING_BARBER

    form = get_form(context)
    form.select_barber(barbers[index])

    await query.edit_message_text(
        f"{format_form_summary(form)}\n\nHizmet seçin:",
        reply_markup=service_keyboard(),
        parse_mode="HTML",
    )
    return CHOOSING_SERVICE


async def service_selected(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    query = update.callback_query
    await query.answer()

    services = get_config().services
    index = _index_from_callback(query.data)
    if index >= len(services):
        logger.warning(f"Unknown service index in callback: {query.data}")
        return CHOOSING_SERVICE

    form = get_form(context)
    form.select_service(services[index])

    await query.edit_message_text(
        f"{format_form_summary(form)}\n\n"
        "Fiyat seçin veya fiyatı yazın:",
        reply_markup=price_keyboard(form.suggested_prices()),
        parse_mode="HTML",
    )
    return CHOOSING_PRICE


async def price_selected(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Quick-select price button"""
    query = update.callback_query
    await query.answer()

    form = get_form(context)
    tiers = form.suggested_prices()
    index = _index_from_callback(query.data)
    if index >= len(tiers):
        logger.warning(f"Unknown price index in callback: {query.data}")
        return CHOOSING_PRICE

    form.select_price(tiers[index])

    await query.edit_message_text(
        f"{format_form_summary(form)}\n\nKaydetmek istiyor musunuz?",
        reply_markup=confirm_keyboard(),
        parse_mode="HTML",
    )
    return CONFIRMING


async def price_typed(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Free-text price entry"""
    text = update.message.text.strip()
    try:
        price = validate_price(text)
    except InvalidPrice:
        await update.message.reply_text(INVALID_PRICE_TEXT)
        return CHOOSING_PRICE

    form = get_form(context)
    form.select_price(price)

    await update.message.reply_text(
        f"{format_form_summary(form)}\n\nKaydetmek istiyor musunuz?",
        reply_markup=confirm_keyboard(),
        parse_mode="HTML",
    )
    return CONFIRMING


async def save_record(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Save button: validate and append the record"""
    query = update.callback_query
    await query.answer()

    form = get_form(context)
    try:
        record = form.save()
    except MissingField as e:
        logger.info(f"User {update.effective_user.id} save rejected: {e}")
        await query.edit_message_text(
            f"{MISSING_FIELDS_TEXT}\n\n{format_form_summary(form)}",
            reply_markup=barber_keyboard(),
            parse_mode="HTML",
        )
        return CHOOSING_BARBER
    except InvalidPrice as e:
        logger.info(f"User {update.effective_user.id} save rejected: {e}")
        await query.edit_message_text(
            f"{INVALID_PRICE_TEXT}\n\n{format_form_summary(form)}",
            reply_markup=price_keyboard(form.suggested_prices()),
            parse_mode="HTML",
        )
        return CHOOSING_PRICE

    keyboard = [
        [
            InlineKeyboardButton("➕ Yeni Kayıt", callback_data="new_record"),
            InlineKeyboardButton("📋 Kayıtlar", callback_data="records"),
        ]
    ]
    await query.edit_message_text(
        "✅ Hizmet kaydı başarıyla eklendi.\n\n"
        f"💈 {html.escape(record.barber)} · 🕐 {record.time}\n"
        f"✂️ {html.escape(record.service)} · 💰 {html.escape(record.price)}₺",
        reply_markup=InlineKeyboardMarkup(keyboard),
        parse_mode="HTML",
    )
    return ConversationHandler.END


async def cancel_form_button(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    query = update.callback_query
    await query.answer()
    context.user_data.pop(FORM_KEY, None)
    await query.edit_message_text("❌ Kayıt iptal edildi.")
    return ConversationHandler.END


async def cancel_form_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    context.user_data.pop(FORM_KEY, None)
    await update.message.reply_text("❌ Kayıt iptal edildi.")
    return ConversationHandler.END


cancel_handler = CallbackQueryHandler(cancel_form_button, pattern=r"^form_cancel$")

# Create the conversation handler
new_record_conversation = ConversationHandler(
    entry_points=[
        CommandHandler("new", start_new_record),
        CallbackQueryHandler(start_new_record, pattern=r"^new_record$"),
    ],
    states={
        CHOOSING_BARBER: [
            cancel_handler,
            CallbackQueryHandler(barber_selected, pattern=r"^form_barber_\d+$"),
        ],
        CHOOSING_SERVICE: [
            cancel_handler,
            CallbackQueryHandler(service_selected, pattern=r"^form_service_\d+$"),
        ],
        CHOOSING_PRICE: [
            cancel_handler,
            CallbackQueryHandler(price_selected, pattern=r"^form_price_\d+$"),
            MessageHandler(filters.TEXT & ~filters.COMMAND, price_typed),
        ],
        CONFIRMING: [
            cancel_handler,
            CallbackQueryHandler(save_record, pattern=r"^form_save$"),
        ],
    },
    fallbacks=[CommandHandler("cancel", cancel_form_command)],
    allow_reentry=True,
)
