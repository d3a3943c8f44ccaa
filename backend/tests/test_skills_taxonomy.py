from services import skills_taxonomy


def test_normalize_resolves_aliases():
    assert skills_taxonomy.normalize("JS") == "javascript"
    assert skills_taxonomy.normalize("  ReactJS ") == "react"
    assert skills_taxonomy.normalize("k8s") == "kubernetes"


def test_normalize_unknown_is_lowercased():
    assert skills_taxonomy.normalize("Underwater Basket Weaving") == "underwater basket weaving"


def test_normalize_non_string():
    assert skills_taxonomy.normalize(None) == ""
    assert skills_taxonomy.normalize(42) == ""


def test_category_of_known_terms():
    assert skills_taxonomy.category_of("python") == "programming"
    assert skills_taxonomy.category_of("React") == "web_development"
    assert skills_taxonomy.category_of("docker") == "cloud"


def test_category_of_alias_and_canonical():
    assert skills_taxonomy.category_of("js") == "programming"
    # "cpp" only exists as the alias target of "c++"
    assert skills_taxonomy.category_of("cpp") == "programming"


def test_category_of_unknown():
    assert skills_taxonomy.category_of("quantum knitting") == "other"
    assert skills_taxonomy.category_of(None) == "other"


def test_all_skills_unique_and_nonempty():
    skills = skills_taxonomy.all_skills()
    assert len(skills) == len(set(skills))
    assert "python" in skills


def test_is_valid_skill():
    assert skills_taxonomy.is_valid_skill("Python")
    assert skills_taxonomy.is_valid_skill("c++")
    assert not skills_taxonomy.is_valid_skill("quantum knitting")


def test_industry_categories():
    assert "healthcare" in skills_taxonomy.categories_for_industry("healthcare-nursing-jobs")
    assert skills_taxonomy.categories_for_industry("unknown-jobs") == skills_taxonomy.all_categories()


def test_skills_for_industry_limits_vocabulary():
    skills = skills_taxonomy.skills_for_industry("teaching-jobs")
    assert "python" not in skills
    assert "communication" in skills
    assert len(skills) == len(set(skills))
