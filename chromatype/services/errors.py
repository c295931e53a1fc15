GENERIC_FAILURE_MESSAGE = (
    "Something went wrong. The image might be too complex or the service is busy."
)


class CompositionError(Exception):
    """The image-generation stage failed. Always fatal to the request."""


class MissingCredentialError(CompositionError):
    pass


class NoImageReturnedError(CompositionError):
    pass


class GenerationInProgressError(Exception):
    """Another generation is already running for this session."""


class TemplateNotFoundError(KeyError):
    pass


class InvalidImageError(ValueError):
    pass
