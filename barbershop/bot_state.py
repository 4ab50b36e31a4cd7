"""
Accessors for objects kept in the bot's context.

bot_data holds the single RecordStore, report formatter and renderer
created at start-up. user_data holds each chat's entry form and
barber filter selection (not persisted, resets on restart).
"""

from datetime import datetime
from zoneinfo import ZoneInfo
from telegram.ext import ContextTypes

from barbershop.config import get_config
from barbershop.form import FormController
from barbershop.models import ALL_BARBERS
from barbershop.pdf_renderer import ReportPdfRenderer
from barbershop.record_store import RecordStore
from barbershop.report import ReportFormatter

STORE_KEY = "store"
FORMATTER_KEY = "formatter"
RENDERER_KEY = "renderer"
FORM_KEY = "form"
FILTER_KEY = "filter"


def local_now() -> datetime:
    """Current time on the shop's clock"""
    return datetime.now(ZoneInfo(get_config().timezone))


def get_store(context: ContextTypes.DEFAULT_TYPE) -> RecordStore:
    return context.bot_data[STORE_KEY]


def get_formatter(context: ContextTypes.DEFAULT_TYPE) -> ReportFormatter:
    return context.bot_data[FORMATTER_KEY]


def get_renderer(context: ContextTypes.DEFAULT_TYPE) -> ReportPdfRenderer:
    return context.bot_data[RENDERER_KEY]


def new_form(context: ContextTypes.DEFAULT_TYPE) -> FormController:
    """Start a fresh entry form for this chat"""
    form = FormController(
        get_store(context),
        service_prices=get_config().service_prices,
        clock=local_now,
    )
    context.user_data[FORM_KEY] = form
    return form


def get_form(context: ContextTypes.DEFAULT_TYPE) -> FormController:
    form = context.user_data.get(FORM_KEY)
    if form is None:
        form = new_form(context)
    return form


def get_selection(context: ContextTypes.DEFAULT_TYPE) -> str:
    return context.user_data.get(FILTER_KEY, ALL_BARBERS)


def set_selection(context: ContextTypes.DEFAULT_TYPE, selection: str) -> None:
    context.user_data[FILTER_KEY] = selection
