"""Prompt templates for translation and reply generation."""

from __future__ import annotations

import json
from typing import Iterable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from reply_studio.exceptions import ParseError
from reply_studio.models.blocks import InfoBlock
from reply_studio.models.document import ReplyLength, Tone
from reply_studio.models.mail import TranslationResult
from reply_studio.registry.guides import LENGTH_GUIDES, TONE_GUIDES
from reply_studio.registry.templates import resolve_block_label

TRANSLATE_SYSTEM_PROMPT = (
    "あなたはプロの翻訳者です。常に自然で丁寧な日本語に翻訳し、原文のニュアンスを損なわないでください。"
    "出力は必ずJSONで返してください。"
)

TRANSLATION_SCHEMA = {
    "name": "translation",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "language": {"type": "string"},
            "translatedText": {"type": "string"},
        },
        "required": ["language", "translatedText"],
        "additionalProperties": False,
    },
}

REPLY_SYSTEM_PROMPT = """あなたは日本語のメール文面を作成するプロのアシスタントです。

重要な指示:
1. 「必須情報」セクションに記載された情報は、数値・時間・料金・場所などを正確にそのまま使用して返信文に組み込むこと
2. 情報を推測や変更せず、提供されたデータを正確に反映すること
3. 簡潔で要点を押さえた返答を作成すること"""

ENGLISH_SYSTEM_PROMPT = (
    "You are a professional translator. Translate the following Japanese business email reply "
    "into natural, professional English. Maintain the same tone and formality level. "
    "Output only the translated text without any explanations."
)

RULE = "=" * 40
MUST_INCLUDE_HEADER = f"{RULE}\n【必須情報：返信文に必ず含めること】\n{RULE}"
MUST_INCLUDE_INSTRUCTION = (
    "以下の情報を正確に返信文に組み込んでください。\n"
    "各ブロックの情報は、そのままの数値・時間・料金・場所などを使用してください。"
)
MUST_INCLUDE_FOOTER = f"{RULE}\n【必須情報ここまで】\n{RULE}"
NO_NOTES = "特になし"


def build_translate_prompt(customer_text: str) -> str:
    return (
        f"# 原文\n{customer_text}\n\n"
        '# 出力フォーマット\n{"language":"<原文の言語名>","translatedText":"<自然な日本語訳>"}'
    )


def _load_json_object(text: str) -> Optional[dict]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def parse_translation(raw: str) -> TranslationResult:
    """Read ``{language, translatedText}`` from a structured or free-form response.

    Free-form text is searched from its first ``{`` to its last ``}``.
    """
    text = raw.strip()
    data = _load_json_object(text)
    if data is None:
        start = text.find("{")
        end = text.rfind("}")
        if 0 <= start < end:
            data = _load_json_object(text[start : end + 1])
    if data is None:
        raise ParseError("Failed to parse translation result", raw_response=raw)
    try:
        return TranslationResult.model_validate(data)
    except PydanticValidationError as exc:
        raise ParseError("Translation result is missing fields", raw_response=raw) from exc


def format_info_block(index: int, block: InfoBlock) -> Optional[str]:
    """Render one block, or ``None`` when no included field has a value."""
    lines = [
        f"  {field.label}: {field.value}"
        for field in block.fields
        if field.include_in_reply and field.value.strip()
    ]
    if not lines:
        return None
    return "\n".join([f"[{index}] {resolve_block_label(block)}", *lines])


def format_info_blocks(blocks: Iterable[InfoBlock]) -> str:
    """Build the must-include section; empty string when nothing qualifies."""
    rendered: List[str] = []
    for block in blocks:
        text = format_info_block(len(rendered) + 1, block)
        if text is not None:
            rendered.append(text)
    if not rendered:
        return ""
    body = "\n\n".join(rendered)
    return f"{MUST_INCLUDE_HEADER}\n\n{MUST_INCLUDE_INSTRUCTION}\n\n{body}\n\n{MUST_INCLUDE_FOOTER}"


def build_reply_prompt(
    customer_text: str,
    info_blocks: Iterable[InfoBlock],
    notes: str,
    tone: Tone,
    length: Optional[ReplyLength] = None,
    translated_customer_text: Optional[str] = None,
) -> str:
    if translated_customer_text and translated_customer_text.strip():
        base_text = translated_customer_text.strip()
    else:
        base_text = customer_text.strip()

    must_include = format_info_blocks(info_blocks)
    must_include_section = f"\n{must_include}\n" if must_include else ""
    style_lines = [TONE_GUIDES[tone]]
    if length is not None:
        style_lines.append(LENGTH_GUIDES[length])
    style = "\n".join(style_lines)

    return f"""# お客様からのメール（参照用）
{base_text}
{must_include_section}
# 社内メモ（返信に盛り込みたい要点）
{notes.strip() or NO_NOTES}

# 返信スタイル
{style}

# 出力条件（厳守）
1. 本文のみを記載（件名・署名・挨拶文は不要）
2. 「お世話になっております」「今後ともよろしくお願いします」などの定型句は省略
3. **「必須情報」セクションの全ての情報を、数値・時間・料金・場所などを正確にそのまま使用して返信文に組み込むこと**
4. 情報を推測や変更せず、提供されたデータを正確に反映すること
5. 社内メモの内容も反映させること
6. 必要最小限の情報だけを簡潔に記載
7. 余計な確認や質問は追加しない
8. 要点だけを端的に伝える

# 重要な注意
- 「必須情報」セクションに記載された料金は、そのままの数値を使用してください（例: 4,400円 → 「4,400円」）
- 時間もそのまま使用してください（例: 7:45~10:00 → 「7:45~10:00」）
- 場所やその他の情報も、提供されたデータを正確にそのまま使用してください
- 情報を推測したり、変更したりしないでください"""


def build_english_prompt(japanese_text: str) -> str:
    return f"Translate this Japanese business email reply into English:\n\n{japanese_text}"
