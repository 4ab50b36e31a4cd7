"""
Barber Shop POS Bot - Main Entry Point
Minimal bot setup that wires together the record store, commands and handlers.
"""
import logging
from telegram import BotCommand
from telegram.ext import Application, CommandHandler, CallbackQueryHandler

from barbershop.bot_state import STORE_KEY, FORMATTER_KEY, RENDERER_KEY
from barbershop.config import get_config
from barbershop.database import init_database, get_session, close_database
from barbershop.pdf_renderer import ReportPdfRenderer
from barbershop.persistence import RecordPersistence
from barbershop.record_store import RecordStore
from barbershop.report import ReportFormatter

# Import commands
from barbershop.commands.menu import start_command, menu_command
from barbershop.commands.help import help_command
from barbershop.commands.new_record import new_record_conversation
from barbershop.commands.records import records_command
from barbershop.commands.export import export_command

# Import handlers
from barbershop.handlers.buttons import button_callback

# Configure logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)


async def post_init(application: Application) -> None:
    """Post-initialization callback - load records and set bot commands"""
    config = get_config()

    persistence = RecordPersistence(get_session, config.storage_key)
    store = RecordStore.load(persistence)
    application.bot_data[STORE_KEY] = store
    application.bot_data[FORMATTER_KEY] = ReportFormatter.from_config(config)
    application.bot_data[RENDERER_KEY] = ReportPdfRenderer()
    logger.info(f"Record store ready with {len(store)} records")

    # Set bot commands for menu
    commands = [
        BotCommand("start", "Botu başlat"),
        BotCommand("new", "Yeni hizmet kaydı"),
        BotCommand("records", "Günlük kayıtlar"),
        BotCommand("export", "PDF rapor indir"),
        BotCommand("menu", "Ana menü"),
        BotCommand("help", "Yardım"),
        BotCommand("cancel", "Formu iptal et"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands set")


async def post_shutdown(application: Application) -> None:
    """Tear down the record store and database connections"""
    application.bot_data.pop(STORE_KEY, None)
    close_database()
    logger.info("Record store released")


def main() -> None:
    """Start the bot"""
    config = get_config()

    # Initialize database
    logger.info("Initializing database...")
    init_database()

    # Create application
    application = (
        Application.builder()
        .token(config.telegram_bot_token)
        .post_init(post_init)
        .post_shutdown(post_shutdown)
        .build()
    )

    # Register form conversation first so its buttons win over the generic callback
    application.add_handler(new_record_conversation)

    # Register command handlers
    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("menu", menu_command))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("records", records_command))
    application.add_handler(CommandHandler("export", export_command))

    # Register button callback handler
    application.add_handler(CallbackQueryHandler(button_callback))

    # Start bot
    logger.info("Starting bot...")
    application.run_polling(allowed_updates=["message", "callback_query"])


if __name__ == '__main__':
    main()
