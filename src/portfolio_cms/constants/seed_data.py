"""Default content inserted into empty collections on first start.

The public site renders these placeholders until the owner edits them in the
admin area. Each entry is a plain mapping validated by the owning repository.
"""

from __future__ import annotations

from typing import Any

from portfolio_cms.constants.skill_categories import SkillCategory

DEFAULT_PROFILE: dict[str, Any] = {
    "name": "Alex Rivera",
    "title": "Backend Developer",
    "location": "Porto Alegre, Brazil",
    "phone": "+55 51 90000-0000",
    "email": "alex.rivera@example.com",
    "linkedin": "www.linkedin.com/in/alex-rivera/",
    "bio": (
        "Backend developer focused on Java and Spring Boot services and REST APIs. "
        "Experienced with corporate systems, relational databases and clean, "
        "well-tested code that delivers value to the business."
    ),
    "objective": "Backend Developer",
    "photo_url": None,
}

DEFAULT_SKILLS: list[dict[str, Any]] = [
    {
        "name": "Java",
        "category": SkillCategory.LANGUAGE,
        "proficiency": 85,
        "icon": "java",
        "color": "#5382a1",
        "featured": True,
        "order": 1,
    },
    {
        "name": "Spring Boot",
        "category": SkillCategory.FRAMEWORK,
        "proficiency": 80,
        "icon": "spring",
        "color": "#6db33f",
        "featured": True,
        "order": 2,
    },
    {
        "name": "Hibernate/JPA",
        "category": SkillCategory.FRAMEWORK,
        "proficiency": 75,
        "icon": "hibernate",
        "color": "#bcae79",
        "featured": True,
        "order": 3,
    },
    {
        "name": "Oracle Database",
        "category": SkillCategory.DATABASE,
        "proficiency": 75,
        "icon": "oracle",
        "color": "#f80000",
        "featured": True,
        "order": 4,
    },
    {
        "name": "Git",
        "category": SkillCategory.TOOL,
        "proficiency": 80,
        "icon": "git",
        "color": "#f05032",
        "featured": True,
        "order": 5,
    },
    {
        "name": "REST APIs",
        "category": SkillCategory.FRAMEWORK,
        "proficiency": 85,
        "icon": "api",
        "color": "#44cc11",
        "featured": True,
        "order": 6,
    },
]

DEFAULT_EXPERIENCES: list[dict[str, Any]] = [
    {
        "title": "IT Assistant",
        "company": "Northwind Industries",
        "location": "Porto Alegre, Brazil - On-site",
        "start_date": "2025-02-01",
        "end_date": None,
        "current": True,
        "description": "Development and maintenance of corporate ERP systems with Java and Spring Boot.",
        "responsibilities": [
            "Built and maintained backend components for ERP systems with Java 17 and Spring Boot",
            "Implemented REST APIs to integrate internal systems",
            "Tuned Oracle queries, improving report performance by 30%",
            "Automated data consistency jobs with Spring Batch",
            "Wrote unit tests with JUnit 5 and Mockito reaching 80% coverage",
        ],
        "technologies": ["Java 17", "Spring Boot", "Oracle Database", "REST APIs", "JUnit 5"],
        "order": 1,
    },
    {
        "title": "IT Support Developer",
        "company": "Contoso Agro",
        "location": "Brazil - On-site",
        "start_date": "2020-11-01",
        "end_date": "2021-12-31",
        "current": False,
        "description": "Helped develop and maintain ERP modules.",
        "responsibilities": [
            "Developed ERP modules in Java and Delphi",
            "Wrote PL/SQL scripts for database maintenance and migration",
            "Maintained development and staging environments with Docker",
        ],
        "technologies": ["Java", "Delphi", "PL/SQL", "Docker"],
        "order": 2,
    },
    {
        "title": "Developer Apprentice",
        "company": "Fabrikam Software",
        "location": "Brazil - On-site",
        "start_date": "2016-01-01",
        "end_date": "2017-01-31",
        "current": False,
        "description": "Built features for an internal management system.",
        "responsibilities": [
            "Implemented CRUD features in Java",
            "Built responsive web pages with JavaScript, HTML and CSS",
            "Worked in Scrum teams",
        ],
        "technologies": ["Java", "JavaScript", "HTML", "CSS"],
        "order": 3,
    },
]

DEFAULT_PROJECTS: list[dict[str, Any]] = [
    {
        "title": "Task Management REST API",
        "description": (
            "A complete task management API built with Spring Boot following REST "
            "conventions, with JWT authentication, Swagger docs and automated tests."
        ),
        "image_url": "https://images.pexels.com/photos/546819/pexels-photo-546819.jpeg",
        "technologies": ["Java", "Spring Boot", "Spring Security", "JWT", "Swagger", "JUnit"],
        "live_url": None,
        "github_url": "https://github.com/example/task-api",
        "featured": True,
        "order": 1,
    },
    {
        "title": "Library Management System",
        "description": (
            "Catalogue, loan and reservation management for a university library "
            "using a layered architecture."
        ),
        "image_url": "https://images.pexels.com/photos/1370295/pexels-photo-1370295.jpeg",
        "technologies": ["Java", "Spring MVC", "Thymeleaf", "MySQL", "Hibernate"],
        "live_url": None,
        "github_url": "https://github.com/example/library",
        "featured": True,
        "order": 2,
    },
    {
        "title": "Microservices with Spring Cloud",
        "description": (
            "Service discovery, API gateway, circuit breakers and inter-service "
            "communication with Spring Cloud."
        ),
        "image_url": "https://images.pexels.com/photos/1181271/pexels-photo-1181271.jpeg",
        "technologies": ["Java", "Spring Cloud", "Eureka", "Resilience4j", "Docker", "Kubernetes"],
        "live_url": None,
        "github_url": "https://github.com/example/spring-cloud",
        "featured": False,
        "order": 3,
    },
]

DEFAULT_BLOG_POSTS: list[dict[str, Any]] = [
    {
        "title": "Welcome to the New Blog!",
        "content": (
            "This is my **first post** written in *Markdown*.\n\n"
            "## Features\n\n"
            "- Post listing\n"
            "- Single post view\n"
            "- Management through the admin area\n\n"
            "Hope you enjoy it!"
        ),
        "excerpt": "A short introduction to the blog system built into this portfolio.",
        "image_url": "https://images.pexels.com/photos/577585/pexels-photo-577585.jpeg",
        "author_name": "Alex Rivera",
        "tags": ["introduction", "python", "fastapi"],
        "is_published": True,
    },
    {
        "title": "Designing REST APIs That Age Well",
        "content": (
            "Good API design pays off for years.\n\n"
            "### Key ideas\n\n"
            "1. **Stable resource names:** URLs are a contract.\n"
            "2. **Explicit partial updates:** PATCH bodies only carry changed fields.\n"
            "3. **Predictable errors:** map domain errors to consistent status codes.\n"
        ),
        "excerpt": "Lessons learned on building REST APIs that stay easy to evolve.",
        "image_url": "https://images.pexels.com/photos/169573/pexels-photo-169573.jpeg",
        "author_name": "Alex Rivera",
        "tags": ["api", "backend", "design"],
        "is_published": True,
    },
]
