import re
from typing import Any, Dict, Iterable, List

MAX_SNIPPET_CHARS = 1200


def clean_snippet(text: str) -> str:
    """Strip links and noisy whitespace from a search snippet."""

    text = re.sub(r"https?://\S+", "", text)
    text = re.sub(r"www\.\S+", "", text)
    text = re.sub(r"\n{2,}", "\n\n", text)
    text = re.sub(r"[ \t\u00a0]{2,}", " ", text)
    text = text.replace("\r", "")
    return text.strip()


def process_results(results: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Keep title, url and cleaned content of each Tavily hit with usable text."""

    processed: List[Dict[str, str]] = []
    for item in results:
        content = clean_snippet(item.get("content") or "")
        if not content:
            continue
        processed.append(
            {
                "title": item.get("title") or "",
                "url": item.get("url") or "",
                "content": content[:MAX_SNIPPET_CHARS],
            }
        )
    return processed
