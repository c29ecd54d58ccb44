SAMPLE_RESUME = (
    "John Doe\n"
    "Email: john.doe@example.com | (555) 555-5555\n"
    "\n"
    "Experienced Software Engineer with 6+ years building web applications using JavaScript, "
    "React, Node.js, and REST APIs. Skilled in cloud platforms (AWS), CI/CD, automated testing, "
    "and team leadership. Delivered scalable services and improved performance by 30% through "
    "optimization and monitoring."
)

SAMPLE_JOB_DESCRIPTION = (
    "Looking for a Software Engineer with JavaScript, React, Node.js, AWS, REST APIs, "
    "testing, and CI/CD."
)


def placeholder_resume(filename: str) -> str:
    """Stand-in resume text used when an upload could not be parsed."""
    return f"{filename} (parsed fallback)\n{SAMPLE_RESUME}"
