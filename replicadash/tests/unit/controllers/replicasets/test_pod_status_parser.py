"""Tests for pod status parser."""

from __future__ import annotations

import pytest

from replicadash.controllers.replicasets.parsers.pod_status_parser import (
    PodStatusParser,
)


class TestPodStatusParser:
    """Tests for PodStatusParser class."""

    @pytest.fixture
    def parser(self) -> PodStatusParser:
        """Create PodStatusParser instance."""
        return PodStatusParser()

    def test_counts_by_phase(self, parser: PodStatusParser, make_replica_set, make_pod) -> None:
        """Test Running, Pending and Failed pods land in their buckets."""
        replica_set = make_replica_set("rs1", "ns", {"app": "x"}, desired=4, current=3)
        pods = [
            make_pod("p1", "ns", {"app": "x"}, "Running"),
            make_pod("p2", "ns", {"app": "x"}, "Running"),
            make_pod("p3", "ns", {"app": "x"}, "Pending"),
            make_pod("p4", "ns", {"app": "x"}, "Failed"),
        ]

        result = parser.parse_pod_info(replica_set, pods)

        assert result.desired == 4
        assert result.current == 3
        assert result.running == 2
        assert result.waiting == 1
        assert result.failed == 1

    @pytest.mark.parametrize("phase", ["Succeeded", "Unknown", "Terminating", None])
    def test_unmonitored_phases_ignored(
        self, parser: PodStatusParser, make_replica_set, make_pod, phase
    ) -> None:
        """Test pods in other phases are counted in no bucket."""
        replica_set = make_replica_set("rs1", "ns", {"app": "x"})

        result = parser.parse_pod_info(replica_set, [make_pod("p1", "ns", {"app": "x"}, phase)])

        assert (result.running, result.waiting, result.failed) == (0, 0, 0)

    def test_namespace_isolation(self, parser: PodStatusParser, make_replica_set, make_pod) -> None:
        """Test pods in another namespace never count, even with matching labels."""
        replica_set = make_replica_set("rs1", "ns", {"app": "x"})
        pods = [make_pod("p1", "other", {"app": "x"}, "Running")]

        assert parser.parse_pod_info(replica_set, pods).running == 0

    def test_label_mismatch_not_counted(
        self, parser: PodStatusParser, make_replica_set, make_pod
    ) -> None:
        """Test pods whose labels do not satisfy the selector are skipped."""
        replica_set = make_replica_set("rs1", "ns", {"app": "x", "tier": "web"})
        pods = [
            make_pod("p1", "ns", {"app": "x"}, "Running"),
            make_pod("p2", "ns", {"app": "x", "tier": "web", "extra": "1"}, "Running"),
        ]

        assert parser.parse_pod_info(replica_set, pods).running == 1

    def test_empty_selector_counts_nothing(
        self, parser: PodStatusParser, make_replica_set, make_pod
    ) -> None:
        """Test a replica set without selector matches no pods."""
        replica_set = make_replica_set("rs1", "ns", None)
        pods = [make_pod("p1", "ns", {"app": "x"}, "Running")]

        result = parser.parse_pod_info(replica_set, pods)

        assert (result.running, result.waiting, result.failed) == (0, 0, 0)

    def test_declared_counts_read_verbatim(
        self, parser: PodStatusParser, make_replica_set, make_pod
    ) -> None:
        """Test declared current is not reconciled against the pod scan."""
        replica_set = make_replica_set("rs1", "ns", {"app": "x"}, desired=1, current=3)
        pods = [make_pod(f"p{i}", "ns", {"app": "x"}, "Running") for i in range(5)]

        result = parser.parse_pod_info(replica_set, pods)

        assert result.current == 3
        assert result.desired == 1
        assert result.running == 5

    def test_missing_declared_counts_default_to_zero(
        self, parser: PodStatusParser, make_replica_set
    ) -> None:
        """Test absent spec.replicas and status.replicas read as zero."""
        replica_set = make_replica_set("rs1", "ns", {"app": "x"}, desired=None, current=None)

        result = parser.parse_pod_info(replica_set, [])

        assert result.desired == 0
        assert result.current == 0

    def test_apps_replica_set_match_labels(self, parser: PodStatusParser, make_pod) -> None:
        """Test apps/v1 ReplicaSet selectors are matched through matchLabels."""
        replica_set = {
            "metadata": {"name": "rs1", "namespace": "ns"},
            "spec": {"replicas": 2, "selector": {"matchLabels": {"app": "x"}}},
            "status": {"replicas": 2},
        }
        pods = [
            make_pod("p1", "ns", {"app": "x"}, "Running"),
            make_pod("p2", "ns", {"app": "x"}, "Pending"),
        ]

        result = parser.parse_pod_info(replica_set, pods)

        assert result.running == 1
        assert result.waiting == 1

    def test_apps_replica_set_match_expressions_excludes_pods(
        self, parser: PodStatusParser, make_pod
    ) -> None:
        """Test selectors with matchExpressions count no pods instead of over-counting."""
        replica_set = {
            "metadata": {"name": "rs1", "namespace": "ns"},
            "spec": {
                "replicas": 1,
                "selector": {
                    "matchLabels": {"app": "x"},
                    "matchExpressions": [
                        {"key": "tier", "operator": "In", "values": ["web"]}
                    ],
                },
            },
            "status": {"replicas": 1},
        }
        pods = [
            make_pod("web", "ns", {"app": "x", "tier": "web"}, "Running"),
            make_pod("db", "ns", {"app": "x", "tier": "db"}, "Running"),
        ]

        result = parser.parse_pod_info(replica_set, pods)

        assert (result.running, result.waiting, result.failed) == (0, 0, 0)
