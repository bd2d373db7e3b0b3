"""
Lineage tree engine.

Components:
- graph: node/link data model, construction primitives and validation
- editor: branch deletion (prune, orphan sweep, optional compaction, layout)
- compactor: collapse of non-branching chains
- layout: vertical row assignment

Example:
    from lineage.core.editor import StructuralEditor
    from lineage.io.synthetic import generate_sample_tree

    graph = generate_sample_tree()
    StructuralEditor().delete_link("7_0-25_0", graph)
"""
