"""Recursive resolution of a model's reference graph."""

from __future__ import annotations

import logging

from ldraw_packer.exceptions import RootNotFoundError
from ldraw_packer.library.search import PartLibrary
from ldraw_packer.library.search import resolved_path_for
from ldraw_packer.lines.tokens import normalize_reference
from ldraw_packer.lookup.identifiers import DEFAULT_EXTENSION
from ldraw_packer.lookup.identifiers import default_identifier
from ldraw_packer.lookup.identifiers import has_content_extension
from ldraw_packer.lookup.identifiers import part_id_for
from ldraw_packer.lookup.protocol import IdentifierLookupProtocol

from .context import PackContext
from .context import PackResult
from .rewriter import rewrite_document

logger = logging.getLogger(__name__)


class ModelPacker:
    """Resolve a model and everything it references, depth first.

    All state of a run lives in the PackContext passed down the recursion;
    a packer instance can run several models one after the other.
    """

    def __init__(
        self,
        library: PartLibrary,
        lookup: IdentifierLookupProtocol | None = None,
    ) -> None:
        """Initialize packer.

        Args:
            library: Where documents are searched for.
            lookup: Translator for references missing from the library. If
                    None, every missing part degrades to its base part.
        """
        self.library = library
        self.lookup = lookup

    async def pack(self, model_name: str) -> PackResult:
        """Resolve a root model and its whole reference graph.

        Args:
            model_name: Model path relative to the library root.

        Returns:
            PackResult holding the rewritten documents and unsupported parts.

        Raises:
            RootNotFoundError: If the model itself can't be read.
        """
        context = PackContext()
        name = normalize_reference(model_name)
        root_path = await self.resolve(name, context, is_root=True)
        context.cache.remember(name, root_path)
        return PackResult(root_path=root_path, context=context)

    async def get_or_resolve(
        self,
        name: str,
        context: PackContext,
        *,
        allow_fallback: bool = True,
    ) -> str:
        """Resolve a reference once per run.

        Returns:
            The resolved path, from cache when the name or its path was seen.
        """
        cached = context.cache.lookup(name)
        if cached is not None:
            logger.debug(f"Cache hit: {name} -> {cached}")
            return cached

        resolved_path = await self.resolve(name, context, allow_fallback=allow_fallback)
        context.cache.remember(name, resolved_path)
        return resolved_path

    async def resolve(
        self,
        name: str,
        context: PackContext,
        *,
        is_root: bool = False,
        allow_fallback: bool = True,
    ) -> str:
        """Locate a document, rewrite it and record its body.

        Args:
            name: Reference name, slash-normalized.
            context: State of the current run.
            is_root: True for the model being packed.
            allow_fallback: False once a name is itself a lookup result.

        Returns:
            The resolved path to write in the referencing line.

        Raises:
            RootNotFoundError: If is_root and nothing could be read.
        """
        logger.info(f"Adding {name}")

        located = await self.library.locate(name)
        if located is None:
            return await self._resolve_missing(name, context, is_root=is_root, allow_fallback=allow_fallback)

        resolved_path = located.resolved_path
        if not context.cache.reserve(resolved_path):
            logger.debug(f"{name} is already embedded as {resolved_path}")
            return resolved_path

        body = await rewrite_document(
            located.content,
            resolved_path,
            is_root=is_root,
            resolve_reference=lambda reference: self.get_or_resolve(reference, context),
            on_boundary=context.cache.mark_boundary,
        )
        context.add_body(resolved_path, body)
        return resolved_path

    async def _resolve_missing(
        self,
        name: str,
        context: PackContext,
        *,
        is_root: bool,
        allow_fallback: bool,
    ) -> str:
        if is_root:
            raise RootNotFoundError(f"Could not find model {name} in {self.library.root}")

        if allow_fallback and has_content_extension(name):
            part_id = part_id_for(name)
            ldraw_id = await self.lookup.translate(part_id) if self.lookup is not None else None

            if ldraw_id is None:
                context.add_unsupported(name)
                substitute = default_identifier(part_id)
            else:
                substitute = ldraw_id + DEFAULT_EXTENSION

            logger.info(f"Substituting {substitute} for {name}")
            return await self.get_or_resolve(substitute, context, allow_fallback=False)

        # Not in the library; the reference is kept so the line still points somewhere
        fallback_path = resolved_path_for("", name.lower())
        logger.warning(f"Could not find {name} - referencing {fallback_path} without embedding it")
        return fallback_path
