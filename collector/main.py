"""
Module: main.py
Description:
    Collection entry point: adds one looked-up word or phrase to the user's MaiMemo notepad,
    creating the notepad when it does not exist yet.

Usage:
    python cli.py collect WORD
    or, from a host application: `await collect(source, target, config, http, logger)`

Notes:
    Exactly one create or update call is made per successful run; every read happens before it.
"""

from collector.config import Config, validate_config
from collector.errors import CollectError, ErrorKind
from collector.formatter import is_phrase, is_word_in_notepad, normalize_word
from collector.maimemo_client import MaimemoClient
from utils.logger import PluginLogger


async def collect(source: str, target: str, config, http, logger=None) -> None:
    """
    Add `source` to the notepad titled `config.word_list_title`.

    `target` (the translation language) is part of the host's plugin contract and is not used.
    `config` may be a Config or the raw mapping the host passes in.
    Raises CollectError on any failure.
    """
    if not isinstance(config, Config):
        config = Config.from_mapping(config)
    logger = logger or PluginLogger()

    validate_config(config)

    word = normalize_word(source)
    title = config.word_list_title
    client = MaimemoClient(config.api_token, http, logger)

    logger.log(f"Word check enabled: {config.word_check_enabled}")
    if is_phrase(word):
        logger.log("Input contains several words, skipping dictionary check")
    elif config.word_check_enabled:
        logger.log(f'Checking whether "{word}" is in the MaiMemo dictionary...')
        await client.check_word_in_vocabulary(word)
    else:
        logger.log("Word check disabled, skipping dictionary check")

    notepad = await client.find_notepad_by_title(title)

    if notepad:
        detail = await client.get_notepad_detail(notepad["id"])

        if is_word_in_notepad(detail, word):
            raise CollectError(
                ErrorKind.BUSINESS_RULE, f'word "{word}" already in list "{title}"'
            )

        logger.log(f'"{word}" is not in notepad "{title}" yet')
        await client.update_notepad(detail, word)
        logger.log(f'Added "{word}" to notepad "{title}"')
    else:
        logger.log("No existing notepad found, creating a new one...")
        await client.create_notepad(title, word)
        logger.log(f'Created notepad "{title}" with "{word}"')
