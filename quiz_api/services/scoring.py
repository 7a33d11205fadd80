import math
from dataclasses import dataclass
from typing import Dict, List

from quiz_api.core.errors import InvalidQuestionError
from quiz_api.models.quiz import AnswerResult, Question
from quiz_api.utils.text_utils import MAX_OPTIONS, option_letter


@dataclass
class Score:
    score: int
    total: int
    results: List[AnswerResult]

    @property
    def percentage(self) -> int:
        return percentage(self.score, self.total)


def percentage(score: int, total: int) -> int:
    """
    Pourcentage entier, arrondi au demi supérieur (12.5 -> 13).
    """
    if total <= 0:
        return 0
    return int(math.floor(score / total * 100 + 0.5))


def check_answer_key(q: Question) -> None:
    """
    Une question n'est notable que si `answer` figure mot pour mot dans
    `options` et qu'il y a entre 1 et 26 options (A..Z).
    """
    if not q.options or len(q.options) > MAX_OPTIONS:
        raise InvalidQuestionError(f"Question {q.id} invalide: {len(q.options)} options (1 à {MAX_OPTIONS})")
    if q.answer not in q.options:
        raise InvalidQuestionError(f"Question {q.id} invalide: answer {q.answer!r} absente des options")


def correct_letter(q: Question) -> str:
    check_answer_key(q)
    return option_letter(q.options.index(q.answer), len(q.options))


def score_answers(questions: List[Question], answers: Dict[str, str]) -> Score:
    """
    Compare la lettre choisie (par id de question) à la lettre attendue.
    Comparaison stricte : "c" ne vaut pas "C". Une question sans réponse compte faux.
    Toutes les questions sont vérifiées avant de noter : une seule invalide et rien n'est noté.
    """
    keys = {q.id: correct_letter(q) for q in questions}

    score = 0
    results: List[AnswerResult] = []
    for q in questions:
        selected = answers.get(q.id) or ""
        is_correct = selected == keys[q.id]
        if is_correct:
            score += 1
        results.append(
            AnswerResult(
                question=q.question,
                selected=selected,
                correct=is_correct,
                correctAnswer=q.answer,
            )
        )
    return Score(score=score, total=len(questions), results=results)
