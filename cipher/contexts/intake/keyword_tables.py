"""
Keyword tables for skill classification and industry detection.

These aren't meant to be exhaustive. They cover the vocabulary that shows up
most in the resumes the heuristics were tuned on; extend them here rather than
in the matching code.
"""

from cipher.contexts.intake.resume_data_structure import SkillCategory

# =============================================================================
# SKILL CATEGORY KEYWORDS
# =============================================================================

# Scored by substring count; order only matters for readability
CATEGORY_KEYWORDS = {
    SkillCategory.TECHNICAL: (
        "python",
        "sql",
        "javascript",
        "typescript",
        "cloud",
        "aws",
        "azure",
        "gcp",
        "kubernetes",
        "devops",
        "automation",
        "machine learning",
        "ai",
        "data engineering",
    ),
    SkillCategory.SOFT: (
        "communication",
        "collaboration",
        "stakeholder",
        "negotiation",
        "presentation",
        "relationship",
        "customer",
        "sales",
        "influence",
    ),
    SkillCategory.LEADERSHIP: (
        "leadership",
        "strategy",
        "management",
        "mentorship",
        "vision",
        "roadmap",
        "executive",
    ),
    SkillCategory.ANALYTICAL: (
        "analysis",
        "analytics",
        "data",
        "research",
        "modeling",
        "forecasting",
    ),
    SkillCategory.CREATIVE: (
        "design",
        "ux",
        "ui",
        "copywriting",
        "content",
        "brand",
        "creative",
    ),
    SkillCategory.DOMAIN_SPECIFIC: (
        "finance",
        "fintech",
        "healthcare",
        "legal",
        "compliance",
        "security",
        "hr",
        "operations",
        "product",
        "marketing",
    ),
}

# =============================================================================
# INDUSTRY KEYWORDS
# =============================================================================

# (industry, keywords) in reporting order
INDUSTRY_KEYWORDS = (
    ("Fintech", ("fintech", "bank", "payments", "lending", "finance")),
    ("Healthcare", ("healthcare", "clinical", "hospital", "medical")),
    ("SaaS", ("saas", "software", "subscription")),
    ("E-commerce", ("e-commerce", "ecommerce", "retail")),
    ("Education", ("education", "edtech", "learning")),
    ("Cybersecurity", ("security", "cyber", "risk", "compliance")),
    ("Marketing", ("marketing", "growth", "brand", "content")),
    ("Logistics", ("logistics", "supply chain", "operations")),
)

# =============================================================================
# DOCUMENT-WIDE SKILL KEYWORDS
# =============================================================================

HARD_SKILL_KEYWORDS = (
    "project management",
    "program management",
    "product management",
    "data analysis",
    "analytics",
    "sql",
    "python",
    "excel",
    "agile",
    "scrum",
    "roadmapping",
    "go-to-market",
    "user research",
    "machine learning",
    "ai",
    "cloud",
    "devops",
    "security",
    "compliance",
    "finance",
    "budgeting",
    "forecasting",
    "operations",
    "marketing",
    "design",
    "ux",
    "research",
    "content strategy",
    "copywriting",
    "sales",
    "hr",
    "recruiting",
)

SOFT_SKILL_KEYWORDS = (
    "communication",
    "collaboration",
    "leadership",
    "stakeholder management",
    "strategic planning",
    "negotiation",
    "mentorship",
    "coaching",
    "conflict resolution",
    "presentation",
    "relationship building",
    "customer success",
    "team leadership",
    "executive influence",
    "change management",
    "problem solving",
    "critical thinking",
)

SKILL_KEYWORDS = HARD_SKILL_KEYWORDS + SOFT_SKILL_KEYWORDS

# =============================================================================
# SOFT-SKILL INFERENCE RULES
# =============================================================================

# (word stems, implied skills). A stem matches at the start of a word,
# so "lead" covers "leading" and "leadership" but not "pleaded".
INFERRED_SOFT_SKILLS = (
    (
        ("lead", "led", "manage", "director", "vp", "head", "chief", "principal"),
        ("leadership", "team leadership", "coaching"),
    ),
    (
        ("stakeholder", "cross-functional", "partnered", "collaborat"),
        ("stakeholder management", "collaboration"),
    ),
    (
        ("present", "public speaking", "briefed", "communicat"),
        ("public speaking", "communication", "presentation"),
    ),
    (
        ("facilitat", "workshop", "alignment"),
        ("facilitation", "consensus building"),
    ),
    (
        ("negotiat", "contract", "vendor", "procurement"),
        ("negotiation", "vendor management"),
    ),
    (
        ("mentor", "coach", "train"),
        ("mentorship", "coaching"),
    ),
)
