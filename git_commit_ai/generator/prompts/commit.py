"""Prompt template for commit message generation.

The template is sent as-is to the generator with the optional context
section and the staged diff filled in.
"""

COMMIT_PROMPT_TEMPLATE = """You are helping me write git commit messages for this repository. Please follow these guidelines:

**Format:**
- Use conventional commit format: `type(scope): description`
- Types: feat, fix, docs, style, refactor, test, chore, perf
- Keep the first line under 72 characters
- Add a brief body paragraph if the change needs more context (optional)

**Style:**
- Use emojis to make messages more visual and scannable:
  - 🐛 for bug fixes
  - ✨ for new features
  - 📝 for documentation
  - ♻️ for refactoring
  - 🎨 for code style/formatting
  - ⚡ for performance improvements
  - ✅ for tests
  - 🔧 for configuration changes
  - 🚀 for deployments
  - 🔥 for removing code/files
  - 💥 for breaking changes
- Be descriptive but concise - aim for the "sweet spot" between too vague and overly detailed
- Use imperative mood ("add feature" not "added feature")
- Don't end the subject line with a period

**Examples:**
- `✨ feat(auth): add OAuth2 login flow`
- `🐛 fix(api): handle null response in user endpoint`
- `📝 docs: update installation instructions for Docker setup`
- `♻️ refactor(database): simplify query builder logic`
- `⚡ perf(search): add caching layer for frequent queries`

---
{context_section}
Based on the following git diff of staged changes, generate an appropriate commit message following the guidelines above.

**IMPORTANT:**
- Output ONLY the commit message itself
- Do NOT include any explanations, meta-commentary, or markdown formatting
- Do NOT wrap the message in code blocks or quotes
- Just output the raw commit message text

Here is the diff:

"""

CONTEXT_SECTION_TEMPLATE = """

**User's description of what they worked on:**
{user_context}

Please incorporate this context into the commit message where appropriate.

---
"""
