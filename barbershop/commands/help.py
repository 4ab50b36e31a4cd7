"""
/help command - Usage overview
"""

from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ContextTypes


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Show usage information"""
    help_text = (
        "📚 <b>Yardım</b>\n\n"
        "━━━━━━━━━━━━━━━━━━━━\n"
        "<b>📝 KOMUTLAR</b>\n"
        "━━━━━━━━━━━━━━━━━━━━\n\n"
        "<b>/new</b> - Berber, hizmet ve fiyat seçerek kayıt ekle\n"
        "<b>/records</b> - Günün kayıtlarını ve toplam geliri göster\n"
        "<b>/export</b> - Seçili berber için PDF rapor indir\n"
        "<b>/cancel</b> - Açık formu iptal et\n"
        "<b>/menu</b> - Ana menü\n\n"
        "━━━━━━━━━━━━━━━━━━━━\n"
        "<b>💡 İPUÇLARI</b>\n"
        "━━━━━━━━━━━━━━━━━━━━\n\n"
        "• Fiyat seçerken hazır fiyat butonlarını kullanabilir veya fiyatı yazabilirsiniz.\n"
        "• Kayıtlar ekranındaki berber filtresi PDF raporu da belirler.\n"
        "• PDF indirildikten sonra kayıtları temizlemeniz istenir."
    )

    keyboard = [[InlineKeyboardButton("🏠 Ana Menü", callback_data="main_menu")]]
    reply_markup = InlineKeyboardMarkup(keyboard)

    await update.message.reply_text(
        help_text, reply_markup=reply_markup, parse_mode="HTML"
    )
