"""Pydantic models for the conjugator engine and its API."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================================
# Enumerations
# ============================================================================


class VerbType(StrEnum):
    """The three verb classes (動詞の種類)."""

    GODAN = "godan"          # 五段
    ICHIDAN = "ichidan"      # 一段
    IRREGULAR = "irregular"  # 不規則


class IrregularType(StrEnum):
    """Irregular verb subtypes."""

    SURU = "suru"            # する and する-compounds
    KURU = "kuru"            # 来る and 来る-compounds
    ARU = "aru"              # ある (negative is ない)
    IKU = "iku"              # 行く (te/ta use っ)
    HONORIFIC = "honorific"  # くださる, なさる, いらっしゃる, おっしゃる, ござる


class ConjugationCategory(StrEnum):
    """Categories used to group conjugation forms."""

    BASIC = "basic"
    POLITE = "polite"
    NEGATIVE = "negative"
    PAST = "past"
    VOLITIONAL = "volitional"
    POTENTIAL = "potential"
    PASSIVE = "passive"
    CAUSATIVE = "causative"
    CAUSATIVE_PASSIVE = "causative-passive"
    IMPERATIVE = "imperative"
    CONDITIONAL = "conditional"
    TAI_FORM = "tai-form"
    PROGRESSIVE = "progressive"
    HONORIFIC = "honorific"


class Formality(StrEnum):
    """Formality level of a form."""

    PLAIN = "plain"
    POLITE = "polite"


class ErrorCode(StrEnum):
    """Error kinds returned by the conjugation facade."""

    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    UNKNOWN_VERB = "UNKNOWN_VERB"
    AMBIGUOUS_VERB = "AMBIGUOUS_VERB"
    CONJUGATION_FAILED = "CONJUGATION_FAILED"


# ============================================================================
# Engine Models
# ============================================================================


class VerbInfo(BaseModel):
    """Classification of a verb in dictionary form."""

    model_config = ConfigDict(frozen=True)

    dictionary_form: str = Field(..., description="Original input (may include kanji)")
    reading: str = Field(..., description="Reading with katakana folded to hiragana")
    romaji: str = Field(..., description="Romanized reading")
    type: VerbType = Field(..., description="Verb class")
    stem: str = Field(..., description="Invariant portion used for conjugation")
    ending: str = Field(..., description="Final character(s) that decided the class")
    irregular_type: IrregularType | None = Field(None, description="Irregular subtype")
    compound_prefix: str | None = Field(None, description="Prefix of a する/来る compound")

    @model_validator(mode="after")
    def _check_tags(self) -> "VerbInfo":
        if (self.type == VerbType.IRREGULAR) != (self.irregular_type is not None):
            raise ValueError("irregular_type must be set exactly when type is irregular")
        if self.compound_prefix is not None and self.irregular_type not in (
            IrregularType.SURU, IrregularType.KURU,
        ):
            raise ValueError("compound_prefix is only valid for suru/kuru compounds")
        return self


class ConjugationForm(BaseModel):
    """A single conjugated form of a verb."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable identifier, e.g. 'te' or 'potential-plain'")
    name: str = Field(..., description="English name")
    name_japanese: str = Field(..., description="Japanese name")
    kanji: str = Field(..., description="Conjugated form in the verb's own script mix")
    hiragana: str = Field(..., description="Phonetic reading")
    romaji: str = Field(..., description="Romanized reading")
    formality: Formality
    category: ConjugationCategory


class ConjugationResult(BaseModel):
    """All conjugated forms for a verb."""

    model_config = ConfigDict(frozen=True)

    verb: VerbInfo
    forms: tuple[ConjugationForm, ...]
    timestamp: int = Field(..., description="Milliseconds since the epoch")


class ConjugationError(BaseModel):
    """Error value returned instead of a result."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str


class HistoryEntry(BaseModel):
    """A recently conjugated verb."""

    model_config = ConfigDict(frozen=True)

    id: str
    verb: str = Field(..., description="Dictionary form that was conjugated")
    verb_type: VerbType
    timestamp: int


# ============================================================================
# Request Models
# ============================================================================


class ConjugateRequest(BaseModel):
    """Request body for conjugation and classification."""
    verb: str = Field(..., max_length=50, description="Verb in dictionary form")


class ConjugateFormRequest(BaseModel):
    """Request body for a single-form lookup."""
    verb: str = Field(..., max_length=50, description="Verb in dictionary form")
    form_id: str = Field(..., description="Form identifier, e.g. 'te'")


class TextRequest(BaseModel):
    """Request body for script conversion."""
    text: str = Field(..., max_length=1000, description="Text to convert")


# ============================================================================
# Response Models
# ============================================================================


class RomajiResponse(BaseModel):
    """Response for /romaji."""
    text: str
    romaji: str


class KanaResponse(BaseModel):
    """Response for /kana."""
    text: str
    hiragana: str
    katakana: str


class FormDefinitionResponse(BaseModel):
    """One entry of the form catalogue."""
    id: str
    category: ConjugationCategory
    name: str
    name_japanese: str
    formality: Formality
