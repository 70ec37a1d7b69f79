"""
Extraction pipeline.

For each input file: load the XML, select nodes, and for every node strip
the data URI header, decode, and write the image into the file's output
directory. Decode failures and nodes without data are skipped with a
warning; every other error is fatal and propagates to the caller.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from xmlimg.extract import (
    DecodedImage,
    ImageNode,
    SYNTHETIC_NAME,
    decode_payload,
    describe_image,
    dump_error_bytes,
    iter_image_nodes,
)
from xmlimg.runtime import ExtractConfig
from xmlimg.storage import DecodeError, OutputDirectory, is_name_safe, write_image

from .sources import select_input_files


@dataclass
class FileResult:
    """Outcome of processing one input file."""

    filename: str
    nodes: int = 0
    written: list[Path] = field(default_factory=list)
    skipped: int = 0  # Nodes without a payload
    failed: int = 0  # Nodes whose payload did not decode
    output_dir: Path | None = None


@dataclass
class RunResult:
    """Outcome of a whole run."""

    files: list[FileResult] = field(default_factory=list)

    @property
    def images_written(self) -> int:
        return sum(len(f.written) for f in self.files)

    @property
    def skipped(self) -> int:
        return sum(f.skipped for f in self.files)

    @property
    def failed(self) -> int:
        return sum(f.failed for f in self.files)

    def summary(self) -> str:
        return (
            f"Wrote {self.images_written} images from {len(self.files)} files "
            f"({self.skipped} skipped, {self.failed} failed to decode)"
        )


def decode_node(node: ImageNode, config: ExtractConfig) -> DecodedImage | None:
    """
    Decode one node's payload.

    Returns:
        DecodedImage, or None when the node has no payload or it is not
        valid base64 (a warning and hex dump are printed)
    """
    if not node.has_data:
        print(
            f"Warning: node {node.index} ({node.tag}) matched but has no data in "
            f"'{config.data_attr}', skipping",
            file=sys.stderr,
        )
        return None

    try:
        data = decode_payload(node.data or "")
    except DecodeError as e:
        print(
            f"Warning: node {node.index} ({node.tag}): invalid base64 encoding, "
            f"cannot be decoded: {e}",
            file=sys.stderr,
        )
        dump_error_bytes(e.partial, config.dump_width, config.dump_rows)
        return None

    name = node.name
    if not is_name_safe(name):
        fallback = SYNTHETIC_NAME.format(node.index)
        print(
            f"Warning: node {node.index} ({node.tag}) name {name!r} escapes the "
            f"output directory, using {fallback}",
            file=sys.stderr,
        )
        name = fallback

    return DecodedImage(name=name, data=data, node_index=node.index)


def process_file(filename: str, config: ExtractConfig) -> FileResult:
    """
    Extract every image from one XML file.

    Raises:
        FatalError: Unreadable or malformed input, bad XPath, directory
            creation or write failure
    """
    verbose = config.verbose
    result = FileResult(filename=filename)
    out_dir = OutputDirectory(filename, config.output_root, verbose=verbose)

    for node in iter_image_nodes(filename, config.xpath, config.data_attr, config.name_attr):
        result.nodes += 1
        if verbose:
            print(f"  [node {node.index}] {node.tag}", file=sys.stderr)

        image = decode_node(node, config)
        if image is None:
            if node.has_data:
                result.failed += 1
            else:
                result.skipped += 1
            continue

        detail = describe_image(image.data).describe() if verbose else ""
        target = out_dir.path() / image.name
        write_image(target, image.data, verbose=verbose, detail=detail)
        result.written.append(target)

    if out_dir.created:
        result.output_dir = out_dir.target
    return result


def run(config: ExtractConfig) -> RunResult:
    """
    Process every selected input file in order.

    Stops at the first fatal error, which propagates to the caller.

    Example:
        config = get_extract_config(input_files=["cat.xml"], xpath=".//item")
        result = run(config)
        print(result.summary())
    """
    result = RunResult()
    filenames = select_input_files(config.input_files, verbose=config.verbose)

    for i, filename in enumerate(filenames):
        if config.verbose:
            print(f"Processing file (No. {i}, Name {filename})", file=sys.stderr)
        result.files.append(process_file(filename, config))

    if config.verbose:
        print(result.summary(), file=sys.stderr)
    return result
