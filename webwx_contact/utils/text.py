"""
文本工具 - Web 微信昵称 / 签名的清洗

Web 微信接口返回的昵称中混有 HTML 转义字符、表情 <span> 标签以及
零宽格式字符，展示或比较之前需要先转换为纯文本。
"""

import html
import re
import unicodedata

# <span class="emoji emoji1f334"></span>
EMOJI_SPAN_PATTERN = re.compile(r'<span class="(\w*?emoji) (\w*?emoji([0-9a-fA-F]+))"></span>')
# <img class="qqemoji qqemoji0" text="[微笑]_web" src="...">
EMOJI_IMG_PATTERN = re.compile(r'<img class="(\w*?emoji) (\w*?emoji[^"]+?)" text="(.*?)_web" src=[^>]+>')
# digest_emoji 无法识别的表情标签
ANY_EMOJI_SPAN_PATTERN = re.compile(r'<span class="emoji emoji(.{1,10})"></span>')
HTML_TAG_PATTERN = re.compile(r"<[^>]+>")

# 保留换行与制表符，其余控制字符 (Cc) 与格式字符 (Cf) 全部移除
_KEEP_CONTROL_CHARS = {"\n", "\t"}


def _emoji_span_to_char(match: re.Match) -> str:
    code = match.group(3)
    try:
        return chr(int(code, 16))
    except (ValueError, OverflowError):
        return match.group(0)


def digest_emoji(text: str) -> str:
    """将表情标签转换为对应的 Unicode 字符或文字描述。"""
    if not text:
        return ""
    text = EMOJI_IMG_PATTERN.sub(r"\3", text)
    return EMOJI_SPAN_PATTERN.sub(_emoji_span_to_char, text)


def strip_emoji(text: str) -> str:
    """移除剩余的表情 <span> 标签。"""
    if not text:
        return ""
    return ANY_EMOJI_SPAN_PATTERN.sub("", text)


def unescape_html(text: str) -> str:
    """还原 HTML 转义字符（&amp; &lt; &gt; &quot; &apos; 等）。"""
    if not text:
        return ""
    return html.unescape(text)


def strip_html(text: str) -> str:
    """移除所有 HTML 标签。"""
    if not text:
        return ""
    return HTML_TAG_PATTERN.sub("", text)


def strip_control_chars(text: str) -> str:
    """移除控制字符与零宽等格式字符。"""
    if not text:
        return ""
    return "".join(
        ch
        for ch in text
        if ch in _KEEP_CONTROL_CHARS or unicodedata.category(ch) not in ("Cc", "Cf")
    )


def plain_text(text: str | None) -> str:
    """
    把 Web 微信返回的富文本转换为纯文本。

    Args:
        text (str | None): 原始文本，可能含有 HTML 与表情标签

    Returns:
        str: 清洗后的纯文本，输入为空时返回空字符串
    """
    if not text:
        return ""
    return strip_control_chars(strip_html(unescape_html(strip_emoji(digest_emoji(text)))))
