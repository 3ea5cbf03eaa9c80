"""Chatterbox Telegram bot - a thin chat front-end over a Session."""

import asyncio
import logging

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from .config import Config, load_config
from .session import Session, create_session

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands:\n"
    "list - show all tasks\n"
    "todo <text>\n"
    "deadline <text> /by <date>\n"
    "event <text> /from <date> /to <date>\n"
    "mark <n> / unmark <n> / delete <n>\n"
    "find <text>\n"
    "tag /i <n> /t <name> / removetag /i <n> /t <name>\n"
    "findtag <name> / alltags\n"
    "Dates: 2/12/2019 1800, 02-12-2019, Dec 02 2019, 18:00"
)


class AuthFilter(filters.BaseFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def check_update(self, update: Update) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = update.effective_user
        if user is None:
            return False
        return user.id in self.allowed_users


def make_handlers(session: Session):
    """Build the async handlers bound to one session."""

    async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /start command."""
        text = session.greeting()
        if session.has_tasks():
            text += "\n\nHistory found!"
        await update.message.reply_text(text)

    async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /help command."""
        await update.message.reply_text(HELP_TEXT)

    async def message_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Feed a plain text message to the session as one command line."""
        line = update.message.text or ""
        # Session work (and the file save) is blocking; keep it off the event loop.
        response = await asyncio.to_thread(session.process_input, line)
        if response is None:
            response = session.goodbye()
        await update.message.reply_text(response)

    return start_handler, help_handler, message_handler


def create_application(config: Config | None = None, session: Session | None = None) -> Application:
    """Create and configure the Telegram bot application."""
    if config is None:
        config = load_config()

    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to chatterbox.conf"
        )

    if session is None:
        session = create_session(config)

    app = Application.builder().token(config.telegram_bot_token).build()

    auth_filter = AuthFilter(config.telegram_allowed_users)
    start_handler, help_handler, message_handler = make_handlers(session)

    app.add_handler(CommandHandler("start", start_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    app.add_handler(
        MessageHandler(auth_filter & filters.TEXT & ~filters.COMMAND, message_handler)
    )

    # Handle unauthorized access attempts
    async def unauthorized_handler(update: Update, context):
        user = update.effective_user
        logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
        await update.message.reply_text(
            "Unauthorized. This bot is private.\n"
            "If you're the owner, add your Telegram user ID to TELEGRAM_ALLOWED_USERS in chatterbox.conf"
        )

    if config.telegram_allowed_users:
        app.add_handler(
            MessageHandler(~auth_filter & filters.ALL, unauthorized_handler)
        )

    return app


def run_bot(config: Config | None = None):
    """Run the Telegram bot."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    if config is None:
        config = load_config()
    app = create_application(config)

    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info("Starting Chatterbox Telegram bot...")

    app.run_polling(allowed_updates=Update.ALL_TYPES)
