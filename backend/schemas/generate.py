# =========================================================
# FILE: /backend/schemas/generate.py
# =========================================================

from typing import List, Literal, Optional, get_args
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


SkillLevel = Literal["Beginner", "Intermediate", "Advanced"]
Domain = Literal["AIML", "Web Dev", "Data Science", "Cyber Security", "App Dev"]
Language = Literal["Python", "Java", "JavaScript", "C++"]
ProjectType = Literal["Mini Project", "Major Project", "Startup Idea"]


def enum_values(literal) -> List[str]:
    return list(get_args(literal))


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IdeaInput(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, frozen=True)

    skill_level: SkillLevel
    domain: Domain
    language: Language
    project_type: ProjectType


class DatasetEntry(CamelModel):
    name: str
    description: str


class PipelineStage(CamelModel):
    stage: str
    details: str


class AdvancedMetadata(CamelModel):
    optimization: str
    explainability: str
    scalability: str


class CodeTemplate(CamelModel):
    filename: str
    language: str
    content: str


class ProjectIdea(CamelModel):
    title: str
    problem_statement: str
    description: str
    key_features: List[str]
    tech_stack: List[str]
    dataset_suggestions: Optional[List[DatasetEntry]] = None
    roadmap: List[str]
    folder_structure: str
    future_enhancements: List[str]

    # AIML only
    model_name: Optional[str] = None
    learning_type: Optional[str] = None
    evaluation_metric: Optional[str] = None
    ml_pipeline: Optional[List[PipelineStage]] = None
    advanced_metadata: Optional[AdvancedMetadata] = None

    code_templates: Optional[List[CodeTemplate]] = None

    # pydantic reserves the model_ prefix; model_name is a real field here
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())


class IdeaOptions(BaseModel):
    skillLevel: List[str] = Field(default_factory=lambda: enum_values(SkillLevel))
    domain: List[str] = Field(default_factory=lambda: enum_values(Domain))
    language: List[str] = Field(default_factory=lambda: enum_values(Language))
    projectType: List[str] = Field(default_factory=lambda: enum_values(ProjectType))


class ValidationErrorResponse(BaseModel):
    message: str
    field: Optional[str] = None


class ErrorResponse(BaseModel):
    message: str
