"""Tone and length guide copy inserted into the reply prompt."""

from types import MappingProxyType
from typing import Mapping

from reply_studio.models.document import ReplyLength, Tone

TONE_GUIDES: Mapping[Tone, str] = MappingProxyType(
    {
        Tone.POLITE: "ビジネスメールとして丁寧で落ち着いた敬語を用い、誠実で落ち着いた印象を与えてください。",
        Tone.LIGHT: "ビジネスの礼儀を守りつつも、親しみやすく柔らかい表現でコミュニケーションしてください。",
        Tone.CASUAL: (
            "カジュアルかつフレンドリーに、相手との距離を縮める言葉遣いで返信してください。"
            "ただし失礼にはならないように配慮してください。"
        ),
    }
)

LENGTH_GUIDES: Mapping[ReplyLength, str] = MappingProxyType(
    {
        ReplyLength.SHORT: "全体で4〜5文程度にまとめ、要点だけを手短に伝えてください。",
        ReplyLength.MEDIUM: "全体で6〜8文ほど、2段落程度で適度に情報量を持たせてください。",
        ReplyLength.LONG: "全体で8〜12文程度、必要に応じて箇条書きも用いて詳細に説明してください。",
    }
)

TONE_LABELS: Mapping[Tone, str] = MappingProxyType(
    {Tone.POLITE: "ビジネス丁寧", Tone.LIGHT: "ややカジュアル", Tone.CASUAL: "フレンドリー"}
)

LENGTH_LABELS: Mapping[ReplyLength, str] = MappingProxyType(
    {ReplyLength.SHORT: "短め", ReplyLength.MEDIUM: "ふつう", ReplyLength.LONG: "しっかり"}
)
