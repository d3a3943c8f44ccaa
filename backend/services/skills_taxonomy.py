"""Static skill taxonomy: skill -> category lookup and alias normalization.

Every function here is pure and total: unknown skills fall through to
``"other"`` or to their lower-cased form instead of raising.
"""

# ---------------------------------------------------------------------------
# Skills organized by category
# ---------------------------------------------------------------------------
SKILLS_TAXONOMY: dict[str, tuple[str, ...]] = {
    "programming": (
        "javascript", "python", "java", "c++", "c#", "ruby", "php", "swift",
        "kotlin", "go", "rust", "typescript", "sql", "r", "scala", "perl",
        "dart", "matlab", "shell scripting", "bash", "powershell", "vba",
        "objective-c", "groovy", "elixir", "clojure", "haskell", "assembly",
    ),
    "web_development": (
        "html", "css", "react", "angular", "vue", "vue.js", "node.js", "express",
        "django", "flask", "asp.net", "spring", "laravel", "wordpress",
        "responsive design", "rest api", "graphql", "websockets", "next.js",
        "nuxt.js", "gatsby", "tailwind css", "bootstrap", "sass", "less",
        "jquery", "backbone.js", "ember.js", "svelte", "web components",
        "progressive web apps", "single page applications",
    ),
    "mobile": (
        "ios development", "android development", "react native", "flutter",
        "xamarin", "ionic", "swift ui", "jetpack compose", "mobile app development",
        "mobile ui design", "app store optimization", "mobile testing",
        "cordova", "phonegap",
    ),
    "database": (
        "mongodb", "postgresql", "mysql", "oracle", "sql server", "redis",
        "elasticsearch", "cassandra", "dynamodb", "firebase", "mariadb",
        "sqlite", "neo4j", "couchdb", "database design", "data modeling",
        "database administration", "query optimization", "data warehousing",
        "etl", "data migration", "backup and recovery",
    ),
    "cloud": (
        "aws", "azure", "google cloud", "docker", "kubernetes", "terraform",
        "jenkins", "gitlab ci", "circleci", "serverless", "cloud computing",
        "devops", "ci/cd", "ansible", "chef", "puppet", "microservices",
        "cloud architecture", "cloud security", "infrastructure as code",
        "containerization", "orchestration", "cloud migration", "cloudformation",
        "aws lambda", "azure devops", "gcp", "heroku", "digitalocean",
    ),
    "data_science": (
        "machine learning", "deep learning", "data analysis", "statistics",
        "pandas", "numpy", "scikit-learn", "tensorflow", "pytorch", "keras",
        "data visualization", "tableau", "power bi", "data mining",
        "predictive modeling", "neural networks", "natural language processing",
        "computer vision", "big data", "spark", "hadoop", "data engineering",
        "feature engineering", "model deployment", "a/b testing", "hypothesis testing",
        "regression analysis", "classification", "clustering", "time series analysis",
        "jupyter", "r studio", "sas", "spss",
    ),
    "soft_skills": (
        "communication", "teamwork", "leadership", "problem solving",
        "critical thinking", "time management", "adaptability", "creativity",
        "collaboration", "presentation skills", "analytical skills",
        "attention to detail", "work ethic", "interpersonal skills",
        "conflict resolution", "decision making", "organizational skills",
        "multitasking", "emotional intelligence", "negotiation", "mentoring",
        "customer service", "client relations", "stakeholder engagement",
        "compliance", "reporting", "documentation", "stakeholder management",
        "recruitment", "training",
    ),
    "project_management": (
        "agile", "scrum", "kanban", "jira", "project planning",
        "stakeholder management", "risk management", "budgeting",
        "waterfall", "project coordination", "resource management",
        "sprint planning", "product management", "pmp", "prince2",
        "change management", "quality management", "scope management",
        "schedule management", "cost management", "asana", "trello",
        "microsoft project", "monday.com", "confluence",
    ),
    "design": (
        "ui/ux design", "figma", "adobe xd", "sketch", "photoshop", "illustrator",
        "user research", "wireframing", "prototyping", "user interface design",
        "user experience", "graphic design", "web design", "mobile design",
        "design thinking", "usability testing", "indesign", "after effects",
        "premiere pro", "typography", "color theory", "brand design",
        "logo design", "visual design", "interaction design", "accessibility design",
        "design systems", "material design", "responsive design", "motion design",
    ),
    "finance": (
        "financial analysis", "accounting", "bookkeeping", "financial reporting",
        "budgeting", "forecasting", "financial modeling", "tax preparation",
        "audit", "quickbooks", "excel", "sap", "oracle financials",
        "accounts payable", "accounts receivable", "general ledger",
        "financial statements", "gaap", "ifrs", "cost accounting",
        "management accounting", "financial planning", "investment analysis",
        "risk assessment", "compliance", "reconciliation", "payroll",
    ),
    "business_analysis": (
        "requirements gathering", "process modeling", "data modeling",
        "business intelligence", "stakeholder analysis", "feasibility study",
        "business process", "systems analysis", "documentation",
        "business strategy", "market research", "competitive analysis",
        "swot analysis", "gap analysis", "kpi tracking", "reporting",
        "business case development", "workflow optimization",
    ),
    "testing": (
        "quality assurance", "unit testing", "integration testing",
        "automated testing", "manual testing", "selenium", "jest",
        "mocha", "cypress", "test driven development", "bug tracking",
        "regression testing", "performance testing", "security testing",
        "load testing", "stress testing", "user acceptance testing",
        "test planning", "test case design", "defect management",
        "continuous testing", "postman", "jmeter", "appium", "testng",
    ),
    "security": (
        "cybersecurity", "network security", "information security",
        "penetration testing", "encryption", "authentication",
        "authorization", "security protocols", "vulnerability assessment",
        "firewall", "vpn", "security compliance", "incident response",
        "threat analysis", "security auditing", "ethical hacking",
        "siem", "intrusion detection", "identity management",
        "security architecture", "iso 27001", "gdpr", "hipaa",
        "pci dss", "malware analysis",
    ),
    "engineering": (
        "cad", "autocad", "solidworks", "matlab", "simulink",
        "civil engineering", "mechanical engineering", "electrical engineering",
        "structural engineering", "hvac", "plc programming", "scada",
        "lean manufacturing", "six sigma", "quality control",
        "project engineering", "technical drawing", "blueprint reading",
        "prototyping", "testing and validation", "process improvement",
        "fea", "cfd", "gis", "revit", "3d modeling",
    ),
    "healthcare": (
        "patient care", "clinical skills", "medical terminology",
        "electronic health records", "hipaa compliance", "nursing care",
        "pharmacology", "anatomy", "physiology", "diagnostic procedures",
        "treatment planning", "medical documentation", "cpr", "first aid",
        "infection control", "medical coding", "medical billing",
        "epic", "cerner", "healthcare administration", "patient safety",
    ),
    "education": (
        "curriculum development", "lesson planning", "classroom management",
        "educational technology", "student assessment", "instructional design",
        "differentiated instruction", "learning management systems",
        "educational psychology", "pedagogy", "e-learning", "moodle",
        "canvas", "blackboard", "student engagement", "grading",
        "parent communication", "special education", "tutoring",
        "educational leadership",
    ),
    "marketing": (
        "digital marketing", "seo", "sem", "social media marketing",
        "content marketing", "email marketing", "marketing automation",
        "google analytics", "google ads", "facebook ads", "linkedin marketing",
        "marketing strategy", "brand management", "copywriting",
        "content creation", "campaign management", "market analysis",
        "crm", "hubspot", "salesforce", "mailchimp", "hootsuite",
        "conversion optimization", "influencer marketing", "affiliate marketing",
        "video marketing", "growth hacking",
    ),
    "human_resources": (
        "recruitment", "talent acquisition", "interviewing", "onboarding",
        "employee relations", "performance management", "compensation",
        "benefits administration", "hr policies", "labor law",
        "training and development", "succession planning", "hrms",
        "applicant tracking system", "employee engagement",
        "organizational development", "workforce planning", "hr analytics",
        "diversity and inclusion", "conflict resolution", "payroll processing",
    ),
}

# ---------------------------------------------------------------------------
# Skill aliases and variations -> canonical form
# ---------------------------------------------------------------------------
SKILL_ALIASES: dict[str, str] = {
    # Programming
    "js": "javascript", "ts": "typescript", "py": "python",
    "c++": "cpp", "c#": "csharp",
    # Web frameworks
    "reactjs": "react", "react.js": "react",
    "nodejs": "node.js", "node": "node.js",
    "vuejs": "vue.js", "angularjs": "angular", "nextjs": "next.js",
    # Data & AI
    "ml": "machine learning", "ai": "artificial intelligence",
    "dl": "deep learning", "nlp": "natural language processing",
    "cv": "computer vision",
    # Cloud
    "amazon web services": "aws", "gcp": "google cloud", "k8s": "kubernetes",
    "ec2": "aws", "lambda": "aws lambda",
    # Testing
    "qa": "quality assurance", "qc": "quality control",
    "tdd": "test driven development", "bdd": "behavior driven development",
    # Design
    "ui": "user interface", "ux": "user experience", "ui/ux": "ui/ux design",
    # Other
    "api": "rest api", "rdbms": "database", "nosql": "mongodb",
    "ci/cd": "continuous integration", "cicd": "ci/cd",
    "devops": "development operations",
    "fullstack": "full stack development", "full stack": "full stack development",
    "frontend": "front end development", "front end": "front end development",
    "backend": "back end development", "back end": "back end development",
    "seo": "search engine optimization", "sem": "search engine marketing",
    "crm": "customer relationship management",
    "erp": "enterprise resource planning",
    "pmp": "project management professional",
    "scrum master": "scrum", "product owner": "product management",
}

# ---------------------------------------------------------------------------
# Job-board industry tags -> relevant taxonomy categories
# ---------------------------------------------------------------------------
INDUSTRY_CATEGORIES: dict[str, tuple[str, ...]] = {
    "it-jobs": (
        "programming", "web_development", "mobile", "database", "cloud",
        "data_science", "testing", "security", "project_management",
    ),
    "engineering-jobs": ("engineering", "cloud", "project_management", "soft_skills"),
    "healthcare-nursing-jobs": ("healthcare", "soft_skills"),
    "accounting-finance-jobs": ("finance", "soft_skills", "business_analysis"),
    "teaching-jobs": ("education", "soft_skills"),
    "scientific-qa-jobs": ("data_science", "testing", "engineering", "soft_skills"),
    "creative-design-jobs": ("design", "web_development", "marketing", "soft_skills"),
    "sales-jobs": ("business_analysis", "marketing", "soft_skills"),
    "pr-advertising-marketing-jobs": ("marketing", "design", "soft_skills"),
    "hr-jobs": ("human_resources", "soft_skills", "project_management"),
}


def _build_term_categories() -> dict[str, str]:
    # A term listed under several categories keeps the first one.
    terms: dict[str, str] = {}
    for category, skills in SKILLS_TAXONOMY.items():
        for skill in skills:
            terms.setdefault(skill, category)
    return terms


def _build_canonical_categories(terms: dict[str, str]) -> dict[str, str]:
    # Canonical names reached only through an alias ("c++" -> "cpp") inherit
    # the category of the taxonomy term that aliases to them.
    canonical: dict[str, str] = {}
    for term, category in terms.items():
        canonical.setdefault(SKILL_ALIASES.get(term, term), category)
    return canonical


_TERM_CATEGORY = _build_term_categories()
_CANONICAL_CATEGORY = _build_canonical_categories(_TERM_CATEGORY)


def normalize(skill: str) -> str:
    """Return the canonical name of a skill token (alias-resolved, lower-cased)."""
    if not isinstance(skill, str):
        return ""
    key = skill.lower().strip()
    return SKILL_ALIASES.get(key, key)


def category_of(skill: str) -> str:
    """Return the taxonomy category of a skill, or ``"other"``."""
    if not isinstance(skill, str):
        return "other"
    key = skill.lower().strip()
    if key in _TERM_CATEGORY:
        return _TERM_CATEGORY[key]
    canonical = SKILL_ALIASES.get(key, key)
    return _TERM_CATEGORY.get(canonical) or _CANONICAL_CATEGORY.get(canonical, "other")


def all_skills() -> list[str]:
    """All taxonomy terms, deduplicated, in taxonomy order."""
    return list(_TERM_CATEGORY)


def is_valid_skill(skill: str) -> bool:
    return normalize(skill) in _TERM_CATEGORY or normalize(skill) in _CANONICAL_CATEGORY


def skills_in_category(category: str) -> list[str]:
    return list(SKILLS_TAXONOMY.get(category, ()))


def all_categories() -> list[str]:
    return list(SKILLS_TAXONOMY)


def categories_for_industry(industry_tag: str) -> list[str]:
    """Taxonomy categories relevant to a job-board tag; all of them if unknown."""
    return list(INDUSTRY_CATEGORIES.get(industry_tag, SKILLS_TAXONOMY.keys()))


def skills_for_industry(industry_tag: str) -> list[str]:
    seen: dict[str, None] = {}
    for category in categories_for_industry(industry_tag):
        for skill in SKILLS_TAXONOMY.get(category, ()):
            seen.setdefault(skill, None)
    return list(seen)
