"""Tests for skill normalization and synonym resolution."""
from match_engine.matching.normalizer import (
    IdentityResolver,
    SynonymTableResolver,
    matches_any,
    normalize_skill,
    normalize_skills,
    skills_match,
)


class TestNormalizeSkill:
    """Tests for normalize_skill."""

    def test_lowercases_and_trims(self):
        assert normalize_skill("  Python ") == "python"

    def test_strips_punctuation(self):
        assert normalize_skill("Node.js") == "nodejs"

    def test_keeps_plus_and_hash(self):
        assert normalize_skill("C++") == "c++"
        assert normalize_skill("C#") == "c#"

    def test_keeps_inner_spaces(self):
        assert normalize_skill("Spring Boot") == "spring boot"

    def test_none_is_empty(self):
        assert normalize_skill(None) == ""

    def test_normalize_skills_drops_empty_entries(self):
        assert normalize_skills(["Python", "", "!!", None]) == ["python"]

    def test_normalize_skills_handles_missing_list(self):
        assert normalize_skills(None) == []


class TestSkillsMatch:
    """Tests for bidirectional containment matching."""

    def test_containment_either_way(self):
        assert skills_match("react", "reactjs")
        assert skills_match("reactjs", "react")

    def test_unrelated_skills(self):
        assert not skills_match("python", "docker")

    def test_matches_any(self):
        assert matches_any("sql", ["python", "mysql"])
        assert not matches_any("rust", ["python", "mysql"])


class TestSynonymResolvers:
    """Tests for the pluggable synonym resolvers."""

    def test_identity_resolver_is_noop(self):
        assert IdentityResolver().resolve("js") == "js"

    def test_table_lookup_is_normalized(self):
        resolver = SynonymTableResolver({"JS": "JavaScript"})
        assert resolver.resolve("js ") == "JavaScript"
        assert resolver.resolve("Rust") == "Rust"

    def test_normalize_skills_applies_resolver(self):
        resolver = SynonymTableResolver({"k8s": "Kubernetes"})
        assert normalize_skills(["K8s", "Docker"], resolver) == ["kubernetes", "docker"]

    def test_extend_returns_new_resolver(self):
        base = SynonymTableResolver({"js": "JavaScript"})
        extended = base.extend({"py": "Python"})

        assert extended.resolve("py") == "Python"
        assert extended.resolve("js") == "JavaScript"
        assert base.resolve("py") == "py"
