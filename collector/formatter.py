"""
Module: formatter.py
Description:
    Helpers to normalize the looked-up word and to read/write notepad content.

Usage:
    Imported by other modules; not intended to be executed directly.

Notes:
    Notepad content is one word or phrase per line; this tool only ever appends lowercased lines.
"""

POT_TAG = "Pot"


def normalize_word(source: str) -> str:
    return (source or "").strip()


def is_phrase(word: str) -> bool:
    """The MaiMemo dictionary only indexes single words."""
    return " " in word


def content_lines(content: str) -> list[str]:
    return [line.strip().lower() for line in (content or "").split("\n") if line.strip()]


def is_word_in_notepad(notepad: dict, word: str) -> bool:
    target = normalize_word(word).lower()

    if target in content_lines(notepad.get("content", "")):
        return True

    # parsed items cover lines the service rewrote (chapters, inline notes)
    for item in notepad.get("list") or []:
        if item.get("type") == "WORD" and (item.get("word") or "").strip().lower() == target:
            return True

    return False


def append_word(content: str, word: str) -> str:
    new_line = word.lower()
    return f"{content}\n{new_line}" if content else new_line


def build_notepad_input(status: str, content: str, title: str, brief: str, tags: list) -> dict:
    return {
        "notepad": {
            "status": status,
            "content": content,
            "title": title,
            "brief": brief,
            "tags": tags,
        }
    }


def new_notepad_brief(title: str) -> str:
    return f"Word list created by the Pot plugin: {title}"
