from eloquent.models.idea import INITIAL_ELO, IdGenerator, Idea, create_idea

__all__ = [
    "INITIAL_ELO",
    "IdGenerator",
    "Idea",
    "create_idea",
]
