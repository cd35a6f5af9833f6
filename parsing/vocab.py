"""
Fixed vocabularies shared by the extractors.

Everything here is read-only configuration: tuples where order matters
(dictionary order drives output order), frozensets for membership tests.
"""

SECTION_HEADINGS = {
    "summary": ("professional summary", "career objective", "summary", "objective", "about me", "profile"),
    "experience": ("work experience", "professional experience", "employment history", "work history", "experience"),
    "education": ("education", "academic", "qualification"),
    "skills": ("technical skills", "key skills", "core skills", "skills"),
    "projects": ("projects", "project", "portfolio"),
    "certifications": ("certifications", "certification", "certificates", "licenses"),
}

# words that disqualify a line from being a person's name
ROLE_BLACKLIST = frozenset({
    "developer", "engineer", "stack", "backend", "frontend", "software", "lead",
    "senior", "junior", "expert", "architect", "manager", "executive", "student",
    "machine", "learning", "data", "analyst", "full", "dot", "net", "java",
    "python", "react", "web", "ui", "ux", "designer", "consultant", "graduate",
    "intern", "associate", "technology", "solution", "solutions", "quality", "tester", "qa",
    "devops", "cloud", "system", "systems", "admin", "administrator", "network", "security",
    "cyber", "project", "program", "delivery", "service", "services", "operation", "operations",
    "sales", "marketing", "hr", "recruiter", "business", "scientist", "specialist", "officer",
    "director", "head", "trainee", "fresher", "programmer",
})
NOISE_TERMS = frozenset({
    "resume", "cv", "curriculum", "vitae", "profile", "summary", "objective", "experience",
    "education", "skills", "projects", "certifications", "contact", "details", "information",
    "personal", "professional", "career", "work", "history", "technical", "languages",
    "declaration", "references", "phone", "mobile", "email", "address", "linkedin", "github",
    "location", "page", "university", "college", "institute", "school", "pvt", "ltd", "inc",
    "llc", "corp", "limited", "technologies", "company",
})
CONTACT_KEYWORDS = ("phone", "mobile", "email", "e-mail", "contact", "address", "linkedin", "github", "location")

CITIES = (
    "mumbai", "delhi", "new delhi", "bangalore", "bengaluru", "hyderabad", "chennai", "kolkata",
    "pune", "ahmedabad", "jaipur", "lucknow", "chandigarh", "gurgaon", "gurugram", "noida",
    "kochi", "thiruvananthapuram", "coimbatore", "madurai", "mysore", "visakhapatnam", "nagpur",
    "indore", "bhopal", "patna", "ranchi", "bhubaneswar", "guwahati", "kanpur", "surat", "vadodara",
)
LOCATION_STOPWORDS = frozenset({
    "road", "street", "lane", "nagar", "email", "name", "phone", "mobile", "contact", "address",
    "location", "city", "linkedin", "github",
})

SOFT_SKILLS = (
    "Leadership", "Communication", "Problem Solving", "Team Work", "Teamwork",
    "Adaptability", "Critical Thinking", "Creativity", "Time Management", "Organization",
    "Customer Service", "Decision Making", "Negotiation", "Public Speaking", "Analytical",
    "Project Management", "Agile", "Scrum", "Collaboration", "Mentoring",
)
TOOLS = (
    "Python", "Java", "JavaScript", "TypeScript", "C++", "C#", "PHP", "Ruby", "Swift", "Go", "Rust", "Kotlin", "SQL",
    "React", "Angular", "Vue", "Next.js", "Node.js", "Express", "Django", "Flask", "FastAPI", "Spring Boot",
    "Laravel", "ASP.NET", "MongoDB", "PostgreSQL", "MySQL", "Redis", "Elasticsearch", "Firebase",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform", "Jenkins",
    "HTML", "CSS", "Sass", "Tailwind", "Bootstrap", "Redux", "GraphQL", "REST API", "Microservices",
    "Machine Learning", "Deep Learning", "NLP", "Computer Vision", "Data Science", "Pandas", "NumPy",
    "Scikit-learn", "TensorFlow", "PyTorch", "Git", "CI/CD", "Jira", "Postman", "Tableau", "Power BI",
    "Excel", "Figma", "Adobe XD", "Linux", "Windows",
)
# tokens that section mining must never report as a tool
MINING_STOPWORDS = frozenset({
    "skills", "technical skills", "key skills", "soft skills", "core", "languages", "programming",
    "programming languages", "frameworks", "libraries", "tools", "databases", "database", "platforms",
    "technologies", "technology", "tech stack", "stack", "others", "other", "misc", "and", "or", "the",
    "with", "using", "experience", "projects", "project", "role", "company", "position", "designation",
    "responsibilities", "description", "duration", "team", "client", "environment", "tools used",
    "built with", "present", "current", "cloud", "web", "devops", "testing", "extracurricular",
})

ROLE_KEYWORDS = (
    "developer", "engineer", "manager", "lead", "architect", "analyst", "consultant",
    "designer", "product", "project", "business", "data", "devops", "qa", "tester",
    "security", "network", "system", "administrator", "executive", "director",
    "scientist", "programmer", "specialist", "intern",
)

# declaration order is scan order
SENIORITY_KEYWORDS = (
    ("intern", "Intern"), ("internship", "Intern"), ("trainee", "Intern"),
    ("junior", "Junior"),
    ("mid-level", "Mid"), ("mid level", "Mid"), ("intermediate", "Mid"),
    ("senior", "Senior"),
    ("lead", "Lead"), ("principal", "Lead"), ("architect", "Lead"), ("staff", "Lead"), ("director", "Lead"),
)

FIELDS_OF_STUDY = (
    "Computer Science", "Information Technology", "Software Engineering", "Electrical Engineering",
    "Electronics and Communication", "Mechanical Engineering", "Civil Engineering", "Data Science",
    "Artificial Intelligence", "Computer Applications", "Business Administration", "Engineering",
    "Business", "Finance", "Marketing", "Commerce", "Physics", "Chemistry", "Mathematics", "Statistics",
    "Economics",
)
INSTITUTION_KEYWORDS = ("university", "college", "institute", "institution", "school", "academy", "iit", "nit")

CERTIFICATIONS = (
    "AWS", "Google Cloud", "Azure", "Kubernetes", "Docker", "Jenkins", "Terraform",
    "Certified", "Certification", "Certificate", "CISSP", "CEH", "CompTIA", "CCNA",
    "PMP", "Scrum Master", "Six Sigma", "ITIL", "TOGAF", "Salesforce", "SAP",
    "Oracle", "IBM", "Microsoft", "Coursera", "Udemy", "Udacity", "edX",
)
