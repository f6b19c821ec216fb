"""
Keyword tables driving the classifiers.

All entries are lower-case and matched as substrings of the lower-cased resume
text. Order matters: department ties and status precedence follow declaration
order, and skills are reported in vocabulary order.
"""

from typing import Dict, List, Tuple

DEPARTMENT_KEYWORDS: Dict[str, List[str]] = {
    "Engineering": [
        "engineer", "developer", "software", "programming", "coding", "technical",
        "backend", "frontend", "fullstack", "devops",
        "python", "javascript", "react", "docker", "kubernetes",
    ],
    "Design": ["designer", "ui", "ux", "graphic", "visual", "creative", "photoshop", "illustrator", "figma"],
    "Marketing": ["marketing", "digital marketing", "seo", "social media", "advertising", "campaign", "brand"],
    "Sales": ["sales", "business development", "account manager", "customer relations", "revenue"],
    "HR": ["human resources", "hr", "recruitment", "talent acquisition", "people operations"],
    "Finance": ["finance", "accounting", "financial", "budget", "audit", "controller", "analyst"],
    "Operations": ["operations", "logistics", "supply chain", "project management", "process improvement"],
}

# Evaluated top to bottom; the first status with any hit wins
STATUS_KEYWORDS: List[Tuple[str, List[str]]] = [
    ("Employed", ["currently working", "currently employed", "current position", "current role", "- present", "– present", "to present", "to date"]),
    ("Open to Work", ["open to work", "seeking", "looking for", "actively searching", "available immediately", "job search"]),
    ("Student", ["student", "currently studying", "undergraduate", "final year", "internship"]),
    ("Freelance", ["freelance", "self-employed", "independent consultant", "contractor"]),
]

SKILLS_KEYWORDS: List[str] = [
    "javascript", "typescript", "react", "vue", "angular", "node.js", "python", "java", "c++", "c#",
    "html", "css", "sass", "bootstrap", "tailwind", "mongodb", "mysql", "postgresql", "firebase",
    "aws", "azure", "docker", "kubernetes", "git", "github", "gitlab", "jenkins", "ci/cd",
    "photoshop", "illustrator", "figma", "sketch", "adobe", "canva", "indesign",
    "excel", "powerpoint", "word", "google analytics", "seo", "sem", "social media",
    "project management", "agile", "scrum", "jira", "trello", "slack", "teams", "flutter", "react native",
    "graphql", "rest", "api", "web development", "mobile development", "data analysis",
    "machine learning", "artificial intelligence", "data science", "big data", "cloud computing",
    "cybersecurity", "penetration testing", "ethical hacking", "network security", "information security",
    "business analysis", "ux design", "ui design", "graphic design", "content creation", "copywriting",
    "video editing", "audio editing", "public speaking", "communication", "negotiation", "leadership",
    "teamwork", "problem solving", "critical thinking", "time management", "adaptability", "creativity",
]

# A line mentioning any of these is reported as a certification
CERTIFICATION_SIGNALS: List[str] = [
    "certified", "certificate", "certification in", "accredited", "licensed",
    "pmp", "ccna", "ccnp", "cissp", "comptia", "itil", "prince2", "toefl", "ielts",
]

LANGUAGE_KEYWORDS: List[str] = [
    "english", "french", "spanish", "german", "italian", "portuguese", "arabic", "chinese",
    "mandarin", "japanese", "korean", "russian", "hindi", "urdu", "turkish", "dutch",
]

STREET_TYPES: List[str] = [
    "street", "st", "avenue", "ave", "road", "rd", "boulevard", "blvd", "lane", "ln",
    "drive", "dr", "court", "ct", "way", "place", "pl", "square", "sq", "rue",
]

EXPERIENCE_HEADERS: List[str] = ["experience", "work history", "employment"]
EDUCATION_HEADERS: List[str] = ["education", "academic", "qualification", "degree"]
