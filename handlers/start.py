from aiogram import Router
from aiogram.types import Message
from aiogram.filters import CommandStart, Command
from templates.messages import START_TEXT, HELP_TEXT

router = Router(name=__name__)

@router.message(CommandStart())
async def cmd_start(message: Message):
    await message.answer(START_TEXT)

@router.message(Command("help"))
async def cmd_help(message: Message):
    await message.answer(HELP_TEXT)
