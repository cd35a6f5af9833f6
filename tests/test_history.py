from parsing.history import (
    extract_certifications,
    extract_education,
    extract_projects,
    extract_summary,
    extract_work_experience,
)

EDUCATION = """B.E. in Mechanical Engineering from Anna University, 2016
Diploma in Automobile Engineering
Government Polytechnic College
2012
12th, Delhi Public School, 2010"""

EXPERIENCE = """Company: Acme Corp
Role: Backend Developer
2019 - 2022
Built billing services.

Volunteered at local events

Data Analyst - Flipkart - Bengaluru
Jan 2023 - Present"""

PROJECTS = """Project Name: Chat App
Built with React, Node.js; Socket.IO

Inventory Tracker - stock levels for a small shop
Technologies: Python, Flask, SQLite, Python"""


def test_education_entries():
    bachelor, diploma, school = extract_education(EDUCATION)
    assert bachelor.degree == "Bachelor"
    assert bachelor.field == "Mechanical Engineering"
    assert bachelor.institution == "Anna University"
    assert bachelor.year == "2016"

    assert diploma.degree == "Diploma"
    assert diploma.institution == "Government Polytechnic College"
    assert diploma.year == "2012"

    assert school.degree == "High School"
    assert school.institution == "Delhi Public School"
    assert school.year == "2010"


def test_education_one_entry_per_degree():
    section = "B.Tech, IIT Bombay, 2015\nB.Sc, Fergusson College, 2012"
    entries = extract_education(section)
    assert [e.degree for e in entries] == ["Bachelor"]
    assert entries[0].institution == "IIT Bombay"


def test_education_ignores_plain_words():
    assert extract_education("I want to be a better engineer") == []
    assert extract_education(None) == []


def test_work_experience_entries():
    acme, analyst = extract_work_experience(EXPERIENCE)
    assert (acme.company, acme.role) == ("Acme Corp", "Backend Developer")
    assert (acme.start_year, acme.end_year) == ("2019", "2022")
    assert acme.summary.startswith("Company: Acme Corp Role:")

    assert (analyst.company, analyst.role) == ("Flipkart", "Data Analyst")
    assert (analyst.start_year, analyst.end_year) == ("2023", "Present")


def test_work_experience_is_capped():
    section = "\n\n".join(f"Developer at Company{i}" for i in range(8))
    jobs = extract_work_experience(section)
    assert len(jobs) == 5
    assert jobs[0].company == "Company0"


def test_projects():
    chat, tracker = extract_projects(PROJECTS)
    assert chat.name == "Chat App"
    assert chat.technologies == ("React", "Node.js", "Socket.IO")
    assert tracker.name == "Inventory Tracker"
    assert tracker.technologies == ("Python", "Flask", "SQLite")
    assert len(tracker.description) <= 200


def test_projects_are_capped():
    section = "\n\n".join(f"Project {i}: something useful" for i in range(6))
    assert len(extract_projects(section)) == 4


def test_certifications():
    assert extract_certifications("AWS Certified Developer; PMP; Coursera ML course") == ["AWS", "Certified", "PMP", "Coursera"]
    every = " ".join(["AWS", "Azure", "Docker", "Jenkins", "CISSP", "CEH", "CCNA", "PMP", "ITIL", "TOGAF", "SAP", "IBM"])
    assert len(extract_certifications(every)) == 10


def test_summary_from_label():
    text = "Jane Doe\nCareer Objective:\nTo build reliable data platforms for growing teams.\n\nEDUCATION"
    assert extract_summary(text) == "To build reliable data platforms for growing teams."


def test_summary_from_first_sentence():
    text = "JANE DOE\nPassionate developer who loves clean, tested code.\nSkills"
    assert extract_summary(text) == "Passionate developer who loves clean, tested code."


def test_summary_length_bounds():
    assert extract_summary("Summary: Dev.") is None
    assert extract_summary("") is None


def test_work_title_comma_company_with_date_range():
    (job,) = extract_work_experience("Software Engineer, Infosys (2019 - Present)\nBuilt payment APIs.")
    assert (job.company, job.role) == ("Infosys", "Software Engineer")
    assert (job.start_year, job.end_year) == ("2019", "Present")


def test_work_ongoing_word_is_never_a_company():
    (job,) = extract_work_experience("Software Engineer - Present\nBuilt payment APIs.")
    assert job.role == "Software Engineer"
    assert job.company is None


def test_summary_stops_at_labelled_heading():
    text = "Summary: Backend engineer shipping APIs\nSkills: React, Node.js"
    assert extract_summary(text) == "Backend engineer shipping APIs"


def test_summary_absorbs_continuation_line():
    text = "Summary: Backend engineer shipping APIs\nfor fintech and retail clients."
    assert extract_summary(text) == "Backend engineer shipping APIs for fintech and retail clients."
