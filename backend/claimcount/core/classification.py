"""Classification Resolver — at-fault selector to a clause over the classification code.

Invariants:
    - ONLY_AT_FAULT -> code == chargeable
    - ONLY_NOT_AT_FAULT -> code != chargeable
    - ANY -> accepts every code
    - Total over AtFault; unknown values are rejected earlier by parse_criteria
"""

from claimcount.core.domain_types import AtFault, RecordField
from claimcount.core.predicate import Clause, Op


def build_classification_predicate(at_fault: AtFault, chargeable_code: int) -> Clause:
    """Build the classification clause. Pure."""
    match at_fault:
        case AtFault.ONLY_AT_FAULT:
            return Clause(RecordField.CLASSIFICATION_CODE, Op.EQ, chargeable_code)
        case AtFault.ONLY_NOT_AT_FAULT:
            return Clause(RecordField.CLASSIFICATION_CODE, Op.NE, chargeable_code)
        case AtFault.ANY:
            return Clause(RecordField.CLASSIFICATION_CODE, Op.MATCH_ALL)
