from backend.models.generated_idea import GeneratedIdea

__all__ = ["GeneratedIdea"]
