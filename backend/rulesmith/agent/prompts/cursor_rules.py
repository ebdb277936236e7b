from datetime import date

CURSOR_RULES_PROMPT_TEMPLATE = """
As a software development expert, you are creating Cursor rules for the {purpose} project.

PROJECT DETAILS:
- PURPOSE: {purpose}
- TYPE: {category}
- DATE: {current_date}

FORMAT REQUIREMENTS:
1. Start with a clear and concise main title
2. Use hierarchical markdown headings (## for main sections, ### for subsections)
3. Use numbered lists for step-by-step instructions
4. Use bullet points for important notes and guidelines
5. Include language-specific code blocks for all examples
6. Provide good and bad examples with explanatory comments
7. Use bold and italic formatting to emphasize important points
8. Include a footer with "Powered by tuncer-byte" and GitHub reference

CONTENT REQUIREMENTS:
1. PROJECT OVERVIEW:
   - Detailed project purpose and objectives
   - Technical goals and success criteria
   - Recommended technology stack with version numbers
   - Architectural patterns and design decisions

2. CODE STRUCTURE AND ORGANIZATION:
   - Detailed file/folder structure for {category} projects
   - Comprehensive naming conventions with examples
   - Module organization and dependency management
   - State management patterns (if applicable)

3. CODING STANDARDS:
   - Language-specific best practices
   - Error handling and logging strategies
   - Performance optimization techniques
   - Security implementation guidelines
   - Code review checklist

4. DEVELOPMENT WORKFLOW:
   - Git workflow with branch naming rules
   - Commit message format with examples
   - PR template and review process
   - CI/CD pipeline configuration
   - Environment management

5. TESTING REQUIREMENTS:
   - Test pyramid implementation
   - Framework setup and configuration
   - Test coverage goals and metrics
   - Mocking and test data strategies
   - E2E testing approach

6. DOCUMENTATION STANDARDS:
   - Code documentation templates
   - API documentation format
   - README structure and content
   - Architectural decision records
   - Deployment documentation

7. QUALITY ASSURANCE:
   - Code quality metrics
   - Static analysis tools
   - Performance monitoring
   - Security scanning
   - Accessibility guidelines

8. FILE ORGANIZATION:
   - Explain the purpose of each directory
   - Provide examples of correct file placement

9. ONBOARDING PROCESS:
   - Step-by-step guide for new developers
   - Required development environment setup
   - Access management and permissions
   - Communication channels and protocols

10. DEPLOYMENT STRATEGY:
    - Environment configuration
    - Release process
    - Rollback procedures
    - Monitoring and alerting setup

Include specific, practical examples that directly apply to {category} development.
Each guideline should be actionable and specific.
End with a footer containing "Powered by tuncer-byte" and GitHub reference.
"""


def format_current_date(day: date) -> str:
    """en-US short date without zero padding, e.g. 3/7/2026."""
    return f"{day.month}/{day.day}/{day.year}"


def compose_prompt(purpose: str, category: str, current_date: str) -> str:
    return CURSOR_RULES_PROMPT_TEMPLATE.format(
        purpose=purpose,
        category=category,
        current_date=current_date,
    )
