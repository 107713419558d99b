"""Console demo runner.

Runs each input through the reciprocal pipeline and prints one line per
input. Usage::

    python -m disjunction.main 1 2 0 a
"""

import sys
from collections.abc import Sequence
from typing import Optional

from disjunction.application.pipeline_service import ReciprocalPipelineService
from disjunction.shared.config import Settings
from disjunction.shared.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo.

    Args:
        argv: Inputs to run (defaults to the command line; Settings.demo_inputs when empty)

    Returns:
        0 if every input succeeded, 1 otherwise
    """
    settings = Settings()
    configure_logging(settings.log_level)

    if argv is None:
        argv = sys.argv[1:]
    inputs = list(argv) or settings.demo_inputs
    logger.debug(f"Running demo for {len(inputs)} inputs")

    service = ReciprocalPipelineService(settings)
    reports = [service.report(text) for text in inputs]
    for report in reports:
        print(f"{report.input}: {report.message} [{report.status_code}]")

    return 0 if all(report.succeeded for report in reports) else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
