"""glTF scene assembly and binary (GLB) serialization."""

import logging
from collections.abc import Iterable
from pathlib import Path

import numpy as np
from pygltflib import (
    ARRAY_BUFFER,
    FLOAT,
    GLTF2,
    TRIANGLE_FAN,
    VEC3,
    Accessor,
    Attributes,
    Buffer,
    BufferView,
    Material,
    Mesh,
    Node,
    PbrMetallicRoughness,
    Primitive,
    Scene,
)

from starfield.models import MaterialDescriptor, StarRecord
from starfield.palette import lookup_material
from starfield.transform import compute_transform

logger = logging.getLogger(__name__)

# Octagon drawn as a triangle fan: center, then the ring closing on its start.
# Faces +Z, so an unrotated star at (0, 0, -1) faces the origin.
# fmt: off
_OCTAGON = np.array([
      0,   0, 0,  # center
     10,   0, 0,  # start vertex
      7,   7, 0,
      0,  10, 0,
     -7,   7, 0,
    -10,   0, 0,
     -7,  -7, 0,
      0, -10, 0,
      7,  -7, 0,
     10,   0, 0,
], dtype=np.float32).reshape(-1, 3) * np.float32(0.001)
# fmt: on


def _add_octagon(document: GLTF2) -> int:
    """Store the shared octagon in buffer 0 and return its accessor index."""
    blob = _OCTAGON.tobytes()
    document.buffers.append(Buffer(byteLength=len(blob)))
    document.bufferViews.append(
        BufferView(buffer=0, byteOffset=0, byteLength=len(blob), target=ARRAY_BUFFER)
    )
    document.accessors.append(
        Accessor(
            bufferView=len(document.bufferViews) - 1,
            componentType=FLOAT,
            count=len(_OCTAGON),
            type=VEC3,
            min=[float(v) for v in _OCTAGON.min(axis=0)],
            max=[float(v) for v in _OCTAGON.max(axis=0)],
        )
    )
    document.set_binary_blob(blob)
    return len(document.accessors) - 1


def _add_material(document: GLTF2, descriptor: MaterialDescriptor) -> int:
    document.materials.append(
        Material(
            pbrMetallicRoughness=PbrMetallicRoughness(
                baseColorFactor=list(descriptor.base_color),
                metallicFactor=descriptor.metallic,
                roughnessFactor=descriptor.roughness,
            ),
            emissiveFactor=list(descriptor.color),
            extras=descriptor.extras,
        )
    )
    return len(document.materials) - 1


def assemble(
    records: Iterable[StarRecord], palette: dict[str, MaterialDescriptor]
) -> GLTF2:
    """Build the starfield document: one billboard node per star.

    All stars share a single octagon accessor and one material per spectral
    class. Stars whose class is not in the palette get the default material,
    which is added to the document only when first used.

    Args:
        records: Parsed catalog entries, in the order nodes should appear.
        palette: Materials keyed by spectral class letter.

    Returns:
        A pygltflib GLTF2 document with a single scene.
    """
    document = GLTF2(scene=0, scenes=[Scene(nodes=[])])
    root = document.scenes[0]

    position = _add_octagon(document)
    material_index: dict[MaterialDescriptor, int] = {
        descriptor: _add_material(document, descriptor)
        for descriptor in palette.values()
    }

    for star in records:
        descriptor = lookup_material(palette, star.spectral_class)
        if descriptor not in material_index:
            material_index[descriptor] = _add_material(document, descriptor)

        document.meshes.append(
            Mesh(
                primitives=[
                    Primitive(
                        attributes=Attributes(POSITION=position),
                        material=material_index[descriptor],
                        mode=TRIANGLE_FAN,
                    )
                ]
            )
        )

        transform = compute_transform(
            star.right_ascension, star.declination, star.magnitude
        )
        document.nodes.append(
            Node(
                mesh=len(document.meshes) - 1,
                rotation=list(transform.rotation),
                scale=list(transform.scale),
                translation=list(transform.translation),
                extras={"mag": star.magnitude, "bsn": star.id, "name": star.name},
            )
        )
        root.nodes.append(len(document.nodes) - 1)

    logger.debug(
        "Assembled %d star nodes with %d materials",
        len(root.nodes),
        len(document.materials),
    )
    return document


def serialize(document: GLTF2) -> bytes:
    """Encode the document as a binary glTF container."""
    return b"".join(document.save_to_bytes())


def save_glb(document: GLTF2, output_path: Path) -> Path:
    """Write the document as a .glb file.

    Args:
        document: Assembled starfield document.
        output_path: Destination path. Parent directories are created.

    Returns:
        Path to the saved file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(serialize(document))
    return output_path
