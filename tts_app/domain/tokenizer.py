from __future__ import annotations

import numpy as np

from tts_app.domain.vo.encoded_text import EncodedText


def char_tokens(text: str, vocab_size: int) -> list[int]:
    """Map every character to ``ord(ch) % vocab_size``.

    This mirrors the character scheme the bundled model was exported with.
    It is not a real phoneme tokenizer, so output quality depends on the model
    having been trained on exactly this mapping.
    """
    if vocab_size <= 0:
        raise ValueError("vocab_size must be greater than zero.")
    return [ord(ch) % vocab_size for ch in text]


def encode(text: str, vocab_size: int) -> EncodedText:
    tokens = char_tokens(text, vocab_size)

    input_ids = np.asarray(tokens, dtype=np.int64).reshape(1, len(tokens))
    attention_mask = np.ones_like(input_ids)

    return EncodedText(input_ids=input_ids, attention_mask=attention_mask)
