"""Documentation tools exposed over MCP: list_docs, get_doc and search_docs."""

import logging
from dataclasses import dataclass
from typing import Any

from monoid_docs.core.database.base import DocumentStore
from monoid_docs.core.errors import DocumentStoreError
from monoid_docs.mcp_server.registry import RegisteredTool, ToolRegistry
from monoid_docs.mcp_server.resolvers import OrganizationResolver
from monoid_docs.models.api.mcp import ToolDefinition, ToolResult
from monoid_docs.models.domain.documents import Document, Organization

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 10
SNIPPET_CONTEXT_BEFORE = 50
SNIPPET_CONTEXT_AFTER = 100
ELLIPSIS = "..."


@dataclass(frozen=True)
class ToolContext:
    """Everything a tool handler needs for one call."""

    store: DocumentStore
    organization: Organization
    resolver: OrganizationResolver
    search_limit: int = MAX_SEARCH_RESULTS

    @property
    def get_doc_hint(self) -> str:
        return self.resolver.get_doc_hint(self.organization)


def extract_snippet(
    content: str,
    query: str,
    fallback: str | None = None,
    before: int = SNIPPET_CONTEXT_BEFORE,
    after: int = SNIPPET_CONTEXT_AFTER,
) -> str:
    """Excerpt of ``content`` around the first case-insensitive match of ``query``.

    The window spans ``before`` characters ahead of the match to ``after``
    characters past its end. An ellipsis marks each side where the window
    was cut short of the content boundary. Without a match the ``fallback``
    text (usually the document description) is returned, or an empty string.
    """
    match_index = content.lower().find(query.lower())
    if match_index < 0:
        return fallback or ""

    start = max(0, match_index - before)
    end = min(len(content), match_index + len(query) + after)

    prefix = ELLIPSIS if start > 0 else ""
    suffix = ELLIPSIS if end < len(content) else ""
    return f"{prefix}{content[start:end].strip()}{suffix}"


async def resolve_repo_labels(
    store: DocumentStore, documents: list[Document]
) -> dict[str, str]:
    """Map repo ids referenced by ``documents`` to ``owner/name`` labels.

    All references are resolved with one batched lookup. A failed lookup only
    drops the labels.
    """
    repo_ids = [doc.repo_id for doc in documents if doc.repo_id]
    if not repo_ids:
        return {}

    try:
        repos = await store.resolve_repos(repo_ids)
    except DocumentStoreError as e:
        logger.warning(f"Repository lookup failed: {e.message}")
        return {}

    return {repo_id: repo.label for repo_id, repo in repos.items()}


# ===================
# Handlers
# ===================


async def list_docs(ctx: ToolContext, arguments: dict[str, Any]) -> ToolResult:
    """List every published document of the organization."""
    org = ctx.organization

    try:
        docs = await ctx.store.list_published_documents(org.id)
    except DocumentStoreError as e:
        return ToolResult.error(f"Error fetching docs: {e.message}")

    if not docs:
        return ToolResult.from_text(
            f'No published documentation found for organization "{org.name}"'
        )

    repo_labels = await resolve_repo_labels(ctx.store, docs)

    entries = []
    for doc in docs:
        entry = f"- **{doc.title}** (slug: {doc.slug})"
        if doc.description:
            entry += f"\n  {doc.description}"
        repo = repo_labels.get(doc.repo_id) if doc.repo_id else None
        if repo:
            entry += f"\n  Repository: {repo}"
        entries.append(entry)

    doc_list = "\n\n".join(entries)
    return ToolResult.from_text(
        f"# Documentation for {org.name}\n\n"
        f"{len(docs)} document(s) available:\n\n"
        f"{doc_list}\n\n"
        f"Use the `get_doc` tool with {ctx.get_doc_hint} to read a specific document."
    )


async def get_doc(ctx: ToolContext, arguments: dict[str, Any]) -> ToolResult:
    """Return the full markdown of one published document."""
    org = ctx.organization
    doc_slug = arguments["doc_slug"]

    try:
        doc = await ctx.store.get_published_document(org.id, doc_slug)
    except DocumentStoreError as e:
        return ToolResult.error(f"Error fetching doc: {e.message}")

    if doc is None:
        return ToolResult.from_text(
            f'Document "{doc_slug}" not found or not published in organization "{org.name}"'
        )

    # A stored blob replaces the inline content entirely
    content = doc.content
    try:
        blob = await ctx.store.get_document_blob(org.id, doc.slug)
    except DocumentStoreError as e:
        logger.warning(f"Blob lookup failed for {org.id}/{doc.slug}.md: {e.message}")
        blob = None
    if blob is not None:
        content = blob

    repo_info = ""
    if doc.repo_id:
        labels = await resolve_repo_labels(ctx.store, [doc])
        if doc.repo_id in labels:
            repo_info = f"\nRepository: {labels[doc.repo_id]}"

    description = f"\n{doc.description}\n" if doc.description else ""
    return ToolResult.from_text(
        f"# {doc.title}\n\n"
        f"Organization: {org.name}{repo_info}\n"
        f"{description}\n"
        f"---\n\n"
        f"{content}"
    )


async def search_docs(ctx: ToolContext, arguments: dict[str, Any]) -> ToolResult:
    """Keyword search across titles, content and descriptions."""
    org = ctx.organization
    query = arguments["query"]
    limit = max(1, min(ctx.search_limit, MAX_SEARCH_RESULTS))

    try:
        docs = await ctx.store.search_published_documents(org.id, query, limit)
    except DocumentStoreError as e:
        return ToolResult.error(f"Error searching: {e.message}")

    docs = docs[:limit]
    if not docs:
        return ToolResult.from_text(
            f'No results found for "{query}" in {org.name} documentation'
        )

    blocks = []
    for doc in docs:
        snippet = extract_snippet(doc.content, query, fallback=doc.description)
        block = f"### {doc.title}\n**Slug:** {doc.slug}"
        if snippet:
            block += f"\n> {snippet}"
        blocks.append(block)

    results = "\n\n".join(blocks)
    return ToolResult.from_text(
        f'# Search Results for "{query}" in {org.name}\n\n'
        f"Found {len(docs)} result(s):\n\n"
        f"{results}\n\n"
        f"Use `get_doc` with {ctx.get_doc_hint} to read the full document."
    )


# ===================
# Catalogue
# ===================


def _input_schema(properties: dict[str, dict], required: list[str]) -> dict:
    return {"type": "object", "properties": properties, "required": required}


def build_registry(pinned: bool) -> ToolRegistry:
    """Build the tool catalogue for one deployment variant.

    A pinned endpoint already knows its organization; a multi-tenant one
    takes it as an ``org_slug`` argument on every tool.
    """
    org_properties = (
        {}
        if pinned
        else {
            "org_slug": {
                "type": "string",
                "description": 'The organization slug (e.g., "monoidyc")',
            }
        }
    )
    org_required = [] if pinned else ["org_slug"]
    scope = "" if pinned else " within an organization"

    doc_slug = {"type": "string", "description": "The document slug"}
    query = {
        "type": "string",
        "description": "Search query (keyword to search for in titles and content)",
    }

    return ToolRegistry(
        [
            RegisteredTool(
                ToolDefinition(
                    name="list_docs",
                    description=(
                        "List all published documentation pages for this organization"
                        if pinned
                        else "List all published documentation pages for an organization by its slug"
                    ),
                    input_schema=_input_schema(dict(org_properties), list(org_required)),
                ),
                list_docs,
            ),
            RegisteredTool(
                ToolDefinition(
                    name="get_doc",
                    description=(
                        "Get the full content of a documentation page by its slug"
                        if pinned
                        else "Get the full content of a documentation page by organization and document slug"
                    ),
                    input_schema=_input_schema(
                        {**org_properties, "doc_slug": doc_slug},
                        org_required + ["doc_slug"],
                    ),
                ),
                get_doc,
            ),
            RegisteredTool(
                ToolDefinition(
                    name="search_docs",
                    description=f"Search documentation by keyword{scope}",
                    input_schema=_input_schema(
                        {**org_properties, "query": query},
                        org_required + ["query"],
                    ),
                ),
                search_docs,
            ),
        ]
    )


PINNED_TOOLS = build_registry(pinned=True)
MULTI_TENANT_TOOLS = build_registry(pinned=False)
