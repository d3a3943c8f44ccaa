"""Text representations of jobs and curricula for embedding."""

from models.schemas.records import CurriculumRecord, JobRecord

MAX_SKILLS_IN_TEXT = 30
MAX_ADVANCED_SKILLS_IN_TEXT = 15

# Typical roles per field; first keyword found in program name or department wins
CAREER_ROLES: dict[str, str] = {
    # Business & management
    "business": "Business Analyst, Project Manager, Business Development Manager, Operations Manager, Consultant",
    "management": "Manager, Team Lead, Operations Manager, Project Manager, Department Head",
    "administration": "Administrator, Office Manager, Executive Assistant, Operations Coordinator",
    "finance": "Financial Analyst, Investment Banker, Accountant, Financial Advisor, Risk Analyst",
    "accounting": "Accountant, Auditor, Tax Advisor, Financial Controller, Bookkeeper",
    "marketing": "Marketing Manager, Digital Marketing Specialist, Brand Manager, Marketing Analyst",
    "economics": "Economist, Policy Analyst, Research Analyst, Financial Analyst, Data Analyst",
    # Healthcare
    "medicine": "Doctor, Physician, Medical Researcher, Surgeon, General Practitioner",
    "nursing": "Registered Nurse, Nurse Practitioner, Clinical Nurse, Nurse Educator",
    "pharmacy": "Pharmacist, Pharmacy Technician, Clinical Pharmacist, Pharmaceutical Researcher",
    "public health": "Public Health Specialist, Epidemiologist, Health Educator, Community Health Worker",
    "healthcare": "Healthcare Administrator, Medical Officer, Health Services Manager",
    # Engineering
    "engineering": "Engineer, Project Engineer, Design Engineer, Engineering Manager",
    "civil": "Civil Engineer, Structural Engineer, Construction Manager, Site Engineer",
    "mechanical": "Mechanical Engineer, Design Engineer, Manufacturing Engineer, HVAC Engineer",
    "electrical": "Electrical Engineer, Power Engineer, Control Systems Engineer, Electronics Engineer",
    "chemical": "Chemical Engineer, Process Engineer, Plant Engineer, Safety Engineer",
    # Computing
    "computer": "Software Engineer, Software Developer, IT Specialist, Systems Analyst",
    "software": "Software Engineer, Software Developer, Full Stack Developer, Backend Developer",
    "information technology": "IT Specialist, Systems Administrator, Network Engineer, IT Consultant",
    "data science": "Data Scientist, Data Analyst, Machine Learning Engineer, Business Intelligence Analyst",
    "cybersecurity": "Security Analyst, Security Engineer, Penetration Tester, Security Consultant",
    # Sciences
    "biology": "Biologist, Research Scientist, Lab Technician, Biology Teacher, Environmental Scientist",
    "chemistry": "Chemist, Research Scientist, Lab Technician, Quality Control Analyst",
    "physics": "Physicist, Research Scientist, Physics Teacher, Engineer, Data Analyst",
    "mathematics": "Mathematician, Data Analyst, Statistician, Math Teacher, Actuary",
    "environmental": "Environmental Scientist, Conservation Officer, Sustainability Specialist",
    # Social sciences & humanities
    "psychology": "Psychologist, Counselor, Therapist, Human Resources Specialist, Researcher",
    "sociology": "Sociologist, Social Researcher, Policy Analyst, Community Development Officer",
    "political": "Policy Analyst, Government Officer, Political Consultant, Researcher",
    "history": "Historian, History Teacher, Archivist, Museum Curator, Researcher",
    "english": "Writer, Editor, Content Manager, English Teacher, Copywriter",
    "communication": "Communications Specialist, Public Relations Officer, Media Planner, Content Strategist",
    # Education
    "education": "Teacher, Educator, Instructional Coordinator, Education Administrator, Curriculum Developer",
    "teaching": "Teacher, Educator, Instructor, Professor, Education Specialist",
    # Arts & design
    "art": "Artist, Art Director, Graphic Designer, Creative Director, Art Teacher",
    "design": "Designer, Graphic Designer, UX/UI Designer, Product Designer, Creative Director",
    "music": "Musician, Music Teacher, Composer, Music Director, Sound Engineer",
    "film": "Filmmaker, Video Editor, Director, Producer, Cinematographer",
    # Law
    "law": "Lawyer, Attorney, Legal Advisor, Paralegal, Legal Researcher",
    "criminal justice": "Police Officer, Detective, Corrections Officer, Probation Officer, Security Manager",
}

DEGREE_ROLES: dict[str, str] = {
    "certificate": "Certified Professional, Specialist, Technician",
    "diploma": "Diploma Holder, Junior Professional, Assistant",
    "bachelor": "Graduate, Junior Professional, Entry-Level Specialist",
    "master": "Senior Professional, Specialist, Manager, Consultant",
    "phd": "Expert, Researcher, Senior Consultant, Director, Professor",
}


def job_text(job: JobRecord) -> str:
    return f"{job.title} {job.description}".strip()


def career_roles(curriculum: CurriculumRecord) -> str:
    program = curriculum.program_name.lower()
    department = curriculum.department.lower()
    for field, roles in CAREER_ROLES.items():
        if field in program or field in department:
            return roles
    return DEGREE_ROLES.get(curriculum.degree, "Professional, Specialist, Graduate")


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def curriculum_text(curriculum: CurriculumRecord) -> str:
    """Describe a program in prose so it embeds close to matching job ads.

    Covers program identity, overview, target industries, courses, taught
    skills and typical career roles (the last helps matching job titles).
    """
    parts: list[str] = []

    identity = f"{curriculum.program_name} {curriculum.degree} program"
    if curriculum.department:
        identity += f" in {curriculum.department}"
    parts.append(identity + ".")

    if curriculum.description:
        parts.append(f"Program overview: {curriculum.description}")

    if curriculum.target_industries:
        parts.append(
            f"This program prepares students for careers in {', '.join(curriculum.target_industries)}."
        )

    if curriculum.courses:
        course_parts = [
            f"{c.name} ({c.description})" if c.description else c.name
            for c in curriculum.courses
        ]
        parts.append(f"Core curriculum includes: {', '.join(course_parts)}.")

        skills = [s for c in curriculum.courses for s in c.skills]
        names = _unique([s.name for s in skills])
        if names:
            parts.append(
                f"Students will gain expertise in {len(names)} key skills including: "
                f"{', '.join(names[:MAX_SKILLS_IN_TEXT])}."
            )
            categories = _unique([s.category for s in skills])
            parts.append(f"Skills are focused on {', '.join(categories)} domains.")

        advanced = _unique([s.name for s in skills if s.proficiency_level == "advanced"])
        if advanced:
            parts.append(
                f"Advanced proficiency is achieved in: {', '.join(advanced[:MAX_ADVANCED_SKILLS_IN_TEXT])}."
            )

    parts.append(f"Graduates typically pursue roles such as {career_roles(curriculum)}.")
    return " ".join(parts).strip()
