"""
Modèles d'échange avec le serveur et les collecteurs.

Chaque grand entier circule sous forme de chaîne décimale : la conversion
est stricte (chiffres uniquement) afin qu'un paramètre mal formé ne soit
jamais remplacé par une valeur par défaut.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .errors import InvalidParametersError
from .models import BallotOutput, CollectorQuestionShare


def parse_big_int(value) -> int:
    """Convertit une chaîne décimale (ou un int) en entier positif"""
    if isinstance(value, bool):
        raise ValueError("Un booléen n'est pas un grand entier")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("Valeur négative interdite")
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text.isdigit() or not text.isascii():
            raise ValueError(f"Grand entier décimal invalide: {value!r}")
        return int(text)
    raise ValueError(f"Type non supporté pour un grand entier: {type(value).__name__}")

class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

class QuestionParameters(WireModel):
    num_candidates: int = Field(alias="numCandidates", ge=1)

class ElectionParameters(WireModel):
    """Paramètres publics d'une élection, récupérés une fois"""
    num_registered: int = Field(alias="numRegistered", ge=1)
    questions: List[QuestionParameters]
    generator: int
    prime: int

    @field_validator("generator", "prime", mode="before")
    @classmethod
    def parse_big_ints(cls, value):
        return parse_big_int(value)

    @property
    def modulus(self) -> int:
        return self.prime - 1

    def num_candidates(self, question_index: int) -> int:
        if not 0 <= question_index < len(self.questions):
            raise InvalidParametersError(f"Question inexistante: {question_index}")
        return self.questions[question_index].num_candidates

class CollectorElectionParameters(WireModel):
    encrypted_location: Optional[int] = Field(default=None, alias="encryptedLocation")

    @field_validator("encrypted_location", mode="before")
    @classmethod
    def parse_big_ints(cls, value):
        return None if value is None else parse_big_int(value)

class CollectorQuestionParameters(WireModel):
    """Parts d'un collecteur pour une question, telles que reçues"""
    forward_verification_shares: int = Field(alias="forwardVerificationShares")
    reverse_verification_shares: int = Field(alias="reverseVerificationShares")
    forward_ballot_shares: int = Field(alias="forwardBallotShares")
    reverse_ballot_shares: int = Field(alias="reverseBallotShares")

    @field_validator("*", mode="before")
    @classmethod
    def parse_big_ints(cls, value):
        return parse_big_int(value)

    def to_share(self) -> CollectorQuestionShare:
        return CollectorQuestionShare(
            forward_verification_share=self.forward_verification_shares,
            reverse_verification_share=self.reverse_verification_shares,
            forward_ballot_share=self.forward_ballot_shares,
            reverse_ballot_share=self.reverse_ballot_shares,
        )

class VotingData(WireModel):
    """Corps de la requête de vote envoyée au serveur"""
    forward_ballot: int = Field(alias="forwardBallot")
    reverse_ballot: int = Field(alias="reverseBallot")
    g_s: int = Field(alias="gS")
    g_s_prime: int = Field(alias="gSPrime")
    g_s_s_prime: int = Field(alias="gSSPrime")

    @field_validator("*", mode="before")
    @classmethod
    def parse_big_ints(cls, value):
        return parse_big_int(value)

    @field_serializer("forward_ballot", "reverse_ballot", "g_s", "g_s_prime", "g_s_s_prime")
    def serialize_big_ints(self, value: int) -> str:
        return str(value)

    @classmethod
    def from_ballot(cls, ballot: BallotOutput) -> "VotingData":
        return cls(
            forward_ballot=ballot.forward_ballot,
            reverse_ballot=ballot.reverse_ballot,
            g_s=ballot.g_s,
            g_s_prime=ballot.g_s_prime,
            g_s_s_prime=ballot.g_s_s_prime,
        )

    def to_ballot(self) -> BallotOutput:
        return BallotOutput(
            forward_ballot=self.forward_ballot,
            reverse_ballot=self.reverse_ballot,
            g_s=self.g_s,
            g_s_prime=self.g_s_prime,
            g_s_s_prime=self.g_s_s_prime,
        )

    def to_request(self) -> dict:
        """Dictionnaire JSON prêt à être envoyé (clés camelCase, valeurs décimales)"""
        return self.model_dump(by_alias=True)
