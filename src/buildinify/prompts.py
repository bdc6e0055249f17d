"""Prompt text served by the MCP server."""

BUILDIN_INSTRUCTIONS = """\
You have access to Buildin.ai - a Notion-like knowledge base platform. Use the \
following capabilities to help users find and access documentation.

## Available Capabilities

### Search Tool: `search`
Use this to find pages in Buildin.ai by keyword or topic.

**Returns:** Array of resource links to matching pages, each containing:
- Page title and ID
- Parent context (database or page it belongs to)
- URI for accessing full content

**Best practices:**
- Use specific, descriptive search terms
- If results indicate "More results available", pass the provided cursor as \
`start_cursor` to fetch additional pages
- Review page titles to identify the most relevant results before fetching \
full content

### Page Resource: `buildin:///pages/{page_id}`
Access the full markdown content of a Buildin.ai page.

**Usage:** Request the resource URI returned from search results to read page \
content.

**Returns:** Complete page content as markdown, including:
- Page title (as heading)
- All block content: paragraphs, headings, lists, code blocks, tables, images, \
callouts, quotes, toggles, equations
- Preserved formatting: bold, italic, strikethrough, inline code, links
- Nested content structure (indented lists, toggle contents)

## Recommended Workflow

1. **Search first**: Use `search` to find relevant pages by topic or keyword
2. **Review results**: Check page titles and parent context to identify best matches
3. **Fetch content**: Access specific pages via their `buildin:///pages/{page_id}` URI
4. **Paginate if needed**: Use `start_cursor` to retrieve more search results \
when available

## Tips

- Pages may be organized in databases (indicated by "From database: ..." in \
description)
- Child pages are indicated by "Child of page: ..." in description
- If a search returns no results, try broader or alternative keywords
- Page content is rendered as markdown - code blocks preserve language hints \
for syntax highlighting
"""
