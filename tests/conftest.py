# Fixtures shipped with the package for downstream users
from prgate.testing.fixtures import (  # noqa: F401
    event_file,
    mock_client,
    passing_snapshot,
    rule_set,
    unmanaged_label,
)
