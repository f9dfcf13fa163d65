"""Grouping of a sample's ordered tests by department for report layout."""

import logging

from ..schemas.catalogue import LabTest, lookup_test
from ..schemas.report import GroupedTest
from ..schemas.sample import Sample

logger = logging.getLogger(__name__)


def group_by_department(
    sample: Sample, catalogue: dict[str, LabTest]
) -> dict[str, list[GroupedTest]]:
    """Group the sample's tests by department.

    Departments appear in the order their first test was ordered, and tests
    keep their order within a department. Test ids no longer in the catalogue
    are skipped.
    """
    groups: dict[str, list[GroupedTest]] = {}

    for test_id in sample.tests:
        test = lookup_test(catalogue, test_id)
        if test is None:
            logger.debug(f"Sample {sample.id}: test {test_id} not in catalogue, skipping")
            continue
        groups.setdefault(test.department, []).append(
            GroupedTest(test=test, results=sample.results_for(test_id))
        )

    return groups
