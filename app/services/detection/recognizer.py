import re
import string
from dataclasses import dataclass
from typing import ClassVar

from app.models.schemas import CodecFamily, CodecHypothesis, CodecType
from app.services.engines.radix.base32_codec import BASE32_ALPHABET
from app.services.preprocessing.script import detect_script


@dataclass
class ConfidenceLabels:
    """Cut-offs turning a confidence score into a label."""

    high: float = 0.75
    medium: float = 0.45


class CodecRecognizer:
    """
    Rule-based codec recognition.

    Runs a ranked set of pattern checks over the character composition of
    a text and returns hypotheses about which codec produced it. This is a
    best-effort heuristic: a text can satisfy several checks (a string of
    digits and spaces is valid ASCII codes and may also look like Base64),
    so callers get every match, best first.
    """

    LABELS: ClassVar[ConfidenceLabels] = ConfidenceLabels()

    _BINARY_RE: ClassVar[re.Pattern[str]] = re.compile(r"^[01]{8}( [01]{8})*$")
    _MORSE_RE: ClassVar[re.Pattern[str]] = re.compile(r"^[.\-/ ]+$")
    _A1Z26_RE: ClassVar[re.Pattern[str]] = re.compile(r"^\d+(-\d+)+$")
    _ASCII_RE: ClassVar[re.Pattern[str]] = re.compile(r"^\d+( \d+)*$")
    _BASE32_RE: ClassVar[re.Pattern[str]] = re.compile(
        rf"^[{BASE32_ALPHABET}]+=*$"
    )
    _BASE64_RE: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9+/]+={0,2}$")

    def recognize(self, text: str) -> list[CodecHypothesis]:
        """
        Guess which codec produced text.

        Args:
            text: Arbitrary text

        Returns:
            Hypotheses sorted by confidence, highest first. Never empty: a
            shift cipher is always offered as the fallback.
        """
        text = text.strip()
        hypotheses: list[CodecHypothesis] = []

        for check in (
            self._check_binary,
            self._check_morse,
            self._check_a1z26,
            self._check_ascii,
            self._check_base32,
            self._check_base64,
        ):
            hypothesis = check(text)
            if hypothesis is not None:
                hypotheses.append(hypothesis)

        hypotheses.append(self._fallback(text, matched=bool(hypotheses)))
        hypotheses.sort(key=lambda x: x.confidence, reverse=True)

        return hypotheses

    def label(self, confidence: float) -> str:
        """Map a confidence score to 'high', 'medium' or 'low'."""
        if confidence >= self.LABELS.high:
            return "high"
        if confidence >= self.LABELS.medium:
            return "medium"
        return "low"

    def _hypothesis(
        self,
        family: CodecFamily,
        codec_type: CodecType | None,
        confidence: float,
        reasoning: list[str],
    ) -> CodecHypothesis:
        return CodecHypothesis(
            codec_family=family,
            codec_type=codec_type,
            confidence=confidence,
            label=self.label(confidence),
            reasoning=reasoning,
        )

    def _check_binary(self, text: str) -> CodecHypothesis | None:
        if not self._BINARY_RE.match(text):
            return None
        return self._hypothesis(
            CodecFamily.NUMERIC,
            CodecType.BINARY,
            0.95,
            ["Only 0 and 1 in groups of eight separated by spaces"],
        )

    def _check_morse(self, text: str) -> CodecHypothesis | None:
        if not self._MORSE_RE.match(text) or not ("." in text or "-" in text):
            return None

        reasoning = ["Only dots, dashes, spaces and '/'"]
        confidence = 0.7
        if "." in text and "-" in text:
            reasoning.append("Both dots and dashes present")
            confidence = 0.9
        return self._hypothesis(CodecFamily.SYMBOLIC, CodecType.MORSE, confidence, reasoning)

    def _check_a1z26(self, text: str) -> CodecHypothesis | None:
        if not self._A1Z26_RE.match(text):
            return None

        numbers = [int(part) for part in text.split("-")]
        in_range = sum(1 for n in numbers if 1 <= n <= 26)
        if in_range != len(numbers):
            return None
        return self._hypothesis(
            CodecFamily.NUMERIC,
            CodecType.A1Z26,
            0.85,
            ["Hyphen-separated numbers all within 1..26"],
        )

    def _check_ascii(self, text: str) -> CodecHypothesis | None:
        if not self._ASCII_RE.match(text):
            return None

        codes = [int(token) for token in text.split()]
        if any(code > 255 for code in codes):
            return None

        reasoning = ["Space-separated numbers within 0..255"]
        confidence = 0.6
        printable = sum(1 for code in codes if chr(code) in string.printable)
        if printable == len(codes):
            reasoning.append("Every code is a printable character")
            confidence = 0.8
        return self._hypothesis(CodecFamily.NUMERIC, CodecType.ASCII, confidence, reasoning)

    def _check_base32(self, text: str) -> CodecHypothesis | None:
        if not self._BASE32_RE.match(text):
            return None

        reasoning = ["Only upper-case letters, digits 2-7 and '=' padding"]
        confidence = 0.5
        if len(text) % 8 == 0:
            reasoning.append("Length is a multiple of 8")
            confidence = 0.75
        return self._hypothesis(CodecFamily.RADIX, CodecType.BASE32, confidence, reasoning)

    def _check_base64(self, text: str) -> CodecHypothesis | None:
        if len(text) % 4 != 0 or not self._BASE64_RE.match(text):
            return None

        reasoning = ["Base64 alphabet and length is a multiple of 4"]
        confidence = 0.6
        if any(c in text for c in string.ascii_lowercase) or "+" in text or "/" in text:
            reasoning.append("Characters outside the Base32 alphabet present")
            confidence = 0.7
        return self._hypothesis(CodecFamily.RADIX, CodecType.BASE64, confidence, reasoning)

    def _fallback(self, text: str, matched: bool) -> CodecHypothesis:
        confidence = 0.2 if matched else 0.4
        reasoning = ["No structured codec pattern matched"] if not matched else []

        script = detect_script(text)
        if script == "other":
            reasoning.append("No letters to shift")
        else:
            reasoning.append(f"Script: {script}")
            reasoning.append("Letters with punctuation suggest a Caesar or ROT-n shift")
        return self._hypothesis(CodecFamily.SHIFT, CodecType.CAESAR, confidence, reasoning)
