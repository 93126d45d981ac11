"""Post-processors which run on the objects of one entry.

- `truth.ProvenanceProcessor`: flattens objects onto their generator-level
  particles, attributes their energy and selects their leading particle

Each post-processor is configured in the `post` block of the configuration:

.. code-block:: yaml

    post:
      provenance:
        flatten_keys: [towers, photons, jets]
        full_keys: [pf_candidates]
"""

from .manager import PostManager
