import pytest

from models.schemas.records import JobSkill
from services.skill_extractor import SkillsExtractor, determine_importance


@pytest.fixture
def extractor():
    return SkillsExtractor()


def _by_name(skills):
    return {s.name: s for s in skills}


class TestExtractSkills:
    def test_importance_cues(self, extractor):
        text = "We need a JavaScript developer with React and Node.js experience. Python is a plus."
        skills = _by_name(extractor.extract_skills(text))

        assert {"javascript", "react", "node.js", "python"} <= set(skills)
        assert skills["python"].importance == "preferred"
        assert skills["javascript"].importance == "required"
        assert skills["react"].importance == "required"
        assert skills["node.js"].importance == "required"

    def test_repeated_mentions_counted(self, extractor):
        text = "JavaScript is required. We use JavaScript for frontend and JavaScript for backend."
        skills = _by_name(extractor.extract_skills(text))
        assert skills["javascript"].frequency >= 3
        assert skills["javascript"].importance == "required"

    def test_java_not_found_inside_javascript(self, extractor):
        skills = _by_name(extractor.extract_skills("Strong JavaScript skills expected"))
        assert "java" not in skills

    def test_symbol_terms(self, extractor):
        skills = _by_name(extractor.extract_skills("Experience with C++ and C# on Windows"))
        assert "cpp" in skills
        assert "csharp" in skills
        assert skills["cpp"].category == "programming"

    def test_aliases_merge_into_one_record(self, extractor):
        # "gcp" is itself a taxonomy term that normalizes to "google cloud"
        skills = extractor.extract_skills("Deploy on GCP. Google Cloud certification required.")
        names = [s.name for s in skills]
        assert names.count("google cloud") == 1
        assert _by_name(skills)["google cloud"].frequency == 2
        assert _by_name(skills)["google cloud"].importance == "required"

    def test_idempotent(self, extractor):
        text = "Python and SQL required, Docker preferred."
        first = extractor.extract_skills(text)
        second = extractor.extract_skills(text)
        assert [s.model_dump() for s in first] == [s.model_dump() for s in second]

    def test_empty_and_non_string(self, extractor):
        assert extractor.extract_skills("") == []
        assert extractor.extract_skills(None) == []

    def test_names_are_canonical(self, extractor):
        for skill in extractor.extract_skills("Python, PostgreSQL, Docker, Kubernetes and AWS"):
            assert skill.name == skill.name.lower()
            assert skill.frequency >= 1

    def test_for_industry_narrows_vocabulary(self):
        nursing = SkillsExtractor.for_industry("healthcare-nursing-jobs")
        assert nursing.vocabulary_size < SkillsExtractor().vocabulary_size
        assert "python" not in _by_name(nursing.extract_skills("Python is required"))


class TestImportanceSections:
    def test_heading_applies_to_bullets_below(self, extractor):
        text = "Requirements:\n- Python\n- SQL\n\nNice to have:\n- Docker\n- Kubernetes"
        skills = _by_name(extractor.extract_skills(text))

        assert skills["python"].importance == "required"
        assert skills["sql"].importance == "required"
        assert skills["docker"].importance == "preferred"
        assert skills["kubernetes"].importance == "preferred"

    def test_heading_applies_to_next_line(self, extractor):
        text = "Preferred qualifications:\nExperience with AWS and Terraform."
        skills = _by_name(extractor.extract_skills(text))

        assert skills["aws"].importance == "preferred"
        assert skills["terraform"].importance == "preferred"

    def test_blank_line_ends_section(self, extractor):
        text = "Nice to have:\n- Docker\n\nMust have:\n- Python"
        skills = _by_name(extractor.extract_skills(text))

        assert skills["docker"].importance == "preferred"
        assert skills["python"].importance == "required"

    def test_abbreviation_does_not_end_sentence(self, extractor):
        text = "Nice to have: container tooling, e.g. Docker or similar."
        assert _by_name(extractor.extract_skills(text))["docker"].importance == "preferred"

    def test_cue_in_next_line_does_not_leak_back(self, extractor):
        text = "Python and SQL\nBonus: Docker"
        skills = _by_name(extractor.extract_skills(text))

        assert skills["python"].importance == "required"
        assert skills["docker"].importance == "preferred"


def test_determine_importance_defaults_to_required():
    text = "Experience with Docker in production."
    start = text.index("Docker")
    assert determine_importance(text, start, start + len("Docker")) == "required"


def test_determine_importance_preferred_window():
    text = "Kubernetes would be nice to have."
    assert determine_importance(text, 0, len("Kubernetes")) == "preferred"


LONG = " with several years of professional experience building production systems."


class TestExtractFromMultipleJobs:
    def test_demand_rate_uses_skill_bearing_jobs(self, extractor, make_job):
        jobs = [
            make_job("j1", description="Python developer" + LONG),
            make_job("j2", description="Python and SQL engineer" + LONG),
            make_job("j3", description="short"),  # no skill source
            make_job("j4", description=""),
        ]
        skills = _by_name(extractor.extract_from_multiple_jobs(jobs))

        assert skills["python"].job_count == 2
        assert skills["python"].demand_rate == 100.0
        assert skills["sql"].demand_rate == 50.0

    def test_description_length_boundary(self, extractor, make_job):
        at_limit = "Python " + "a" * 43
        over_limit = "SQL " + "a" * 47
        assert len(at_limit) == 50
        assert len(over_limit) == 51

        jobs = [
            make_job("at", description=at_limit),  # not skill-bearing
            make_job("over", description=over_limit),
            make_job("long", description="Python developer" + LONG),
        ]
        skills = _by_name(extractor.extract_from_multiple_jobs(jobs))

        assert skills["python"].job_count == 1
        assert skills["python"].demand_rate == 50.0
        assert skills["sql"].demand_rate == 50.0

    def test_sorted_by_demand(self, extractor, make_job):
        jobs = [
            make_job("j1", description="Python developer" + LONG),
            make_job("j2", description="Python and Docker engineer" + LONG),
            make_job("j3", description="Python, Docker and Terraform" + LONG),
        ]
        rates = [s.demand_rate for s in extractor.extract_from_multiple_jobs(jobs)]
        assert rates == sorted(rates, reverse=True)
        assert all(0 < r <= 100 for r in rates)

    def test_pre_extracted_skills_win(self, extractor, make_job):
        job = make_job(
            "j1",
            description="Python developer" + LONG,
            skills=[JobSkill(name="Go", importance="preferred")],
        )
        skills = _by_name(extractor.extract_from_multiple_jobs([job]))
        assert "python" not in skills
        assert "go" in skills
        assert skills["go"].required_count + skills["go"].preferred_count == 1

    def test_required_and_preferred_counts(self, extractor, make_job):
        jobs = [
            make_job("j1", skills=[JobSkill(name="docker", importance="required")]),
            make_job("j2", skills=[JobSkill(name="docker", importance="preferred")]),
        ]
        docker = _by_name(extractor.extract_from_multiple_jobs(jobs))["docker"]
        assert docker.required_count == 1
        assert docker.preferred_count == 1
        assert docker.job_count == 2

    def test_no_skill_bearing_jobs(self, extractor, make_job):
        assert extractor.extract_from_multiple_jobs([make_job("j1", description="tiny")]) == []
        assert extractor.extract_from_multiple_jobs([]) == []

    def test_top_skills_limit(self, extractor, make_job):
        jobs = [make_job("j1", description="Python, SQL, Docker, Kubernetes, AWS and Terraform" + LONG)]
        assert len(extractor.top_skills(jobs, limit=3)) == 3

    def test_skills_by_category(self, extractor, make_job):
        jobs = [make_job("j1", description="Python and Docker and React" + LONG)]
        grouped = extractor.skills_by_category(jobs)
        assert [s.name for s in grouped["programming"]] == ["python"]
        assert "cloud" in grouped


def test_compare_skills(extractor):
    result = extractor.compare_skills("Python and Docker required", ["python", "HTML"])
    assert [s.name for s in result.matched_skills] == ["python"]
    assert [s.name for s in result.missing_skills] == ["docker"]
    assert result.match_rate == 50.0


def test_compare_skills_nothing_found(extractor):
    result = extractor.compare_skills("", ["python"])
    assert result.total_job_skills == 0
    assert result.match_rate == 0.0
