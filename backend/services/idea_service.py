# FILE: backend/services/idea_service.py
"""
Rule-based project idea generator.

Everything is a table lookup plus a few random draws. All randomness goes
through the `rng` argument so callers (and tests) can pin the output.
"""
from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from backend.core import config
from backend.schemas.generate import (
    AdvancedMetadata,
    DatasetEntry,
    IdeaInput,
    PipelineStage,
    ProjectIdea,
)
from backend.services import idea_tables as t
from backend.services.template_service import select_templates

AIML = "AIML"
DATA_SCIENCE = "Data Science"
TITLE_CANDIDATES = 3

_WORD = re.compile(r"\w+")

TITLE_TRANSFORMS = {
    "Mini Project": "Lite {title}",
    "Major Project": "Advanced {title} System",
    "Startup Idea": "{title} Pro Platform",
}


@dataclass(frozen=True)
class MLSelection:
    model_name: str
    learning_type: str
    evaluation_metric: str


def make_rng(seed: Optional[int] = None) -> random.Random:
    if seed is None:
        seed = config.RANDOM_SEED
    return random.Random(seed)


# ================== SCORING / TITLES ==================

def _tokens(text: str) -> List[str]:
    return _WORD.findall((text or "").lower())


def score_relevance(text: str, reference: str) -> int:
    """Number of word tokens in `text` that also occur in `reference`."""
    ref = set(_tokens(reference))
    return sum(1 for tok in _tokens(text) if tok in ref)


def pick_title(domain: str, rng: random.Random) -> str:
    titles = t.titles_for(domain)
    candidates = [rng.choice(titles) for _ in range(TITLE_CANDIDATES)]

    best = candidates[0]
    best_score = score_relevance(best, domain)
    for challenger in candidates[1:]:
        s = score_relevance(challenger, domain)
        if s > best_score:
            best, best_score = challenger, s
    return best


def customize_title(title: str, project_type: str) -> str:
    pattern = TITLE_TRANSFORMS.get(project_type)
    return pattern.format(title=title) if pattern else title


# ================== TEXT ==================

def pick_problem(domain: str, rng: random.Random) -> str:
    return rng.choice(t.problems_for(domain))


def compose_description(
    problem: str,
    skill_level: str,
    domain: str,
    language: str,
    model_name: Optional[str] = None,
) -> str:
    if domain == AIML:
        return (
            f'This project tackles "{problem}" with a {skill_level.lower()} level machine learning '
            f"solution built in {language}. A {model_name} model sits at its core, trained and "
            f"evaluated end to end."
        )
    return (
        f'This project aims to solve the problem of "{problem}" by building a {skill_level.lower()} '
        f"level {domain} application. The system will leverage {language} to provide a robust solution."
    )


# ================== ML ==================

def _has_any(title: str, hints) -> bool:
    return any(h in title for h in hints)


def select_ml(title: str, skill_level: str, rng: random.Random) -> MLSelection:
    cfg = t.ML_CONFIG.get(skill_level) or t.ML_CONFIG["Beginner"]
    models = list(cfg["models"])
    metrics = list(cfg["metrics"])
    advanced = skill_level == "Advanced"

    if _has_any(title, t.SUPERVISED_TITLE_HINTS):
        return MLSelection(rng.choice(models), cfg["type"], metrics[0])

    if _has_any(title, t.VISION_TITLE_HINTS):
        model = t.VISION_ADVANCED_MODEL if advanced else models[0]
        return MLSelection(model, t.VISION_LEARNING_TYPE, t.VISION_METRIC)

    if _has_any(title, t.NLP_TITLE_HINTS):
        model = t.NLP_ADVANCED_MODEL if advanced else models[0]
        return MLSelection(model, t.NLP_LEARNING_TYPE, t.NLP_METRIC)

    return MLSelection(models[0], t.DEFAULT_LEARNING_TYPE, metrics[0])


def build_pipeline(ml: MLSelection) -> List[PipelineStage]:
    return [
        PipelineStage(
            stage=stage,
            details=details.format(model=ml.model_name, metric=ml.evaluation_metric),
        )
        for stage, details in t.ML_PIPELINE_STAGES
    ]


def build_advanced_metadata(skill_level: str) -> Optional[AdvancedMetadata]:
    if skill_level != "Advanced":
        return None
    return AdvancedMetadata(**t.ADVANCED_NOTES)


# ================== STACK / STRUCTURE / FEATURES ==================

def select_tech_stack(language: str, domain: str) -> List[str]:
    stack = t.TECH_STACK.get((language, domain)) or t.TECH_STACK_DEFAULT.get(language, ())
    return list(stack)


def select_folder_structure(domain: str, language: str) -> str:
    return t.FOLDER_STRUCTURE.get((domain, language)) or t.FOLDER_STRUCTURE_DEFAULT.get(language, "")


def select_features(domain: str, skill_level: str, rng: random.Random) -> List[str]:
    specific = list(t.FEATURES_DOMAIN.get(domain, ()))
    rng.shuffle(specific)
    count = t.FEATURE_COUNT_BY_LEVEL.get(skill_level, t.FEATURE_COUNT_BY_LEVEL["Beginner"])
    return list(t.FEATURES_BASE[: t.BASE_FEATURE_COUNT]) + specific[:count]


def select_datasets(domain: str, rng: random.Random) -> Optional[List[DatasetEntry]]:
    if domain == AIML:
        pool = list(t.AIML_DATASETS)
        rng.shuffle(pool)
        return [DatasetEntry(**d) for d in pool[: t.AIML_DATASET_COUNT]]
    if domain == DATA_SCIENCE:
        return [DatasetEntry(**t.DATA_SCIENCE_DATASET)]
    return None


# ================== ASSEMBLER ==================

def generate_project(idea_input: IdeaInput, rng: Optional[random.Random] = None) -> ProjectIdea:
    rng = rng or make_rng()
    domain = idea_input.domain
    language = idea_input.language
    skill_level = idea_input.skill_level

    base_title = pick_title(domain, rng)
    title = customize_title(base_title, idea_input.project_type)
    problem = pick_problem(domain, rng)

    ml_fields: Dict[str, Any] = {}
    model_name: Optional[str] = None
    if domain == AIML:
        ml = select_ml(base_title, skill_level, rng)
        model_name = ml.model_name
        ml_fields = {
            "model_name": ml.model_name,
            "learning_type": ml.learning_type,
            "evaluation_metric": ml.evaluation_metric,
            "ml_pipeline": build_pipeline(ml),
            "advanced_metadata": build_advanced_metadata(skill_level),
        }

    templates = select_templates(domain, language, skill_level, model_name)

    return ProjectIdea(
        title=title,
        problem_statement=problem,
        description=compose_description(problem, skill_level, domain, language, model_name),
        key_features=select_features(domain, skill_level, rng),
        tech_stack=select_tech_stack(language, domain),
        dataset_suggestions=select_datasets(domain, rng),
        roadmap=list(t.ROADMAP),
        folder_structure=select_folder_structure(domain, language),
        future_enhancements=list(t.FUTURE_ENHANCEMENTS),
        code_templates=templates or None,
        **ml_fields,
    )
