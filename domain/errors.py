class RecipeNotFound(Exception):
    pass


class GenerationError(Exception):
    """Base for failures reported at the generation boundary."""

    status_code = 500
    default_message = "Failed to generate recipe. Please try again."

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)


class InvalidInput(GenerationError):
    status_code = 400
    default_message = "Please provide at least one ingredient"


class GenerationFailed(GenerationError):
    status_code = 500
    default_message = "Failed to generate valid recipe"


class GenerationTimedOut(GenerationError):
    status_code = 504
    default_message = "Recipe generation took too long. Please try again."
