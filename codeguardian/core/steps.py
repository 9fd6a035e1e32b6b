from contextlib import contextmanager

from codeguardian.exceptions import PipelineStepError


@contextmanager
def step(name: str):
    """Tags any exception raised inside the block with the pipeline step name."""
    try:
        yield
    except PipelineStepError:
        raise
    except Exception as e:
        raise PipelineStepError(name, e) from e
