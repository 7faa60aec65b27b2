"""Tests for dependency gating and workflow phase ordering."""

from registry import (
    get_phase_map,
    get_registry,
    get_workflow_order,
    next_ready_agents,
    phase_of,
    validate_dependencies,
)


class TestValidateDependencies:
    """Test validate_dependencies."""

    def test_agent_without_dependencies_is_ready(self):
        """An agent with no dependencies is ready with nothing completed."""
        status = validate_dependencies("market-analyzer", [])
        assert status.is_ready is True
        assert status.missing_dependencies == []

    def test_agent_with_dependencies_lists_all_missing(self):
        """Every declared dependency is reported when nothing is done."""
        status = validate_dependencies("content-creator", [])
        assert status.is_ready is False
        assert set(status.missing_dependencies) == {"brand-voice-architect", "narrative-designer", "market-analyzer"}

    def test_partially_satisfied(self):
        """Only the outstanding dependencies are reported."""
        status = validate_dependencies("customer-insight-specialist", {"market-analyzer"})
        assert status.is_ready is False
        assert status.missing_dependencies == ["positioning-strategist"]

    def test_fully_satisfied(self):
        """The agent is ready once all dependencies completed."""
        status = validate_dependencies(
            "analytics-master", ["campaign-planner", "customer-insight-specialist"]
        )
        assert status.is_ready is True

    def test_unknown_agent_reports_itself(self):
        """An unknown agent is reported as missing itself."""
        status = validate_dependencies("ghost-writer", ["market-analyzer"])
        assert status.is_ready is False
        assert status.missing_dependencies == ["ghost-writer"]


class TestWorkflowOrder:
    """Test phase ordering."""

    def test_four_phases(self):
        """The order always has four lists."""
        assert len(get_workflow_order()) == 4

    def test_every_agent_in_exactly_one_phase(self):
        """The phases partition the full agent set."""
        order = get_workflow_order()
        flattened = [agent_id for phase in order for agent_id in phase]
        assert len(flattened) == len(set(flattened))
        assert set(flattened) == set(get_registry().agent_ids())

    def test_phase_contents(self):
        """Phase lists keep declaration order."""
        order = get_workflow_order()
        assert order[0] == ["market-analyzer", "positioning-strategist", "customer-insight-specialist"]
        assert order[3] == ["analytics-master"]

    def test_dependencies_come_first(self):
        """No agent appears before one of its dependencies."""
        position = {
            agent_id: index
            for index, agent_id in enumerate(a for phase in get_workflow_order() for a in phase)
        }
        registry = get_registry()
        for agent_id in registry.agent_ids():
            for dep_id in registry.dependencies_of(agent_id):
                assert position[dep_id] < position[agent_id]

    def test_phase_map(self):
        """The phase map agrees with the ordered lists."""
        phase_map = get_phase_map()
        assert phase_map.ordered() == get_workflow_order()
        assert phase_map.phase_of("visual-strategist") == 2
        assert phase_map.phase_of("ghost-writer") == 0

    def test_phase_of(self):
        """phase_of returns 0 for unknown agents."""
        assert phase_of("campaign-planner") == 3
        assert phase_of("ghost-writer") == 0


class TestNextReadyAgents:
    """Test next_ready_agents."""

    def test_fresh_session(self):
        """Only Market Analyzer can start a fresh session."""
        assert next_ready_agents([]) == ["market-analyzer"]

    def test_after_market_analysis(self):
        """Positioning unlocks once the market is analysed."""
        assert next_ready_agents(["market-analyzer"]) == ["positioning-strategist"]

    def test_after_strategy(self):
        """Customer insight and visuals unlock after positioning."""
        ready = next_ready_agents(["market-analyzer", "positioning-strategist"])
        assert ready == ["customer-insight-specialist", "visual-strategist"]

    def test_completed_workflow(self):
        """Nothing is ready once every agent completed."""
        assert next_ready_agents(get_registry().agent_ids()) == []
