from typing import Dict, Iterable, Mapping, Optional, Sequence

from webstatic import AnalysisResult, Document, Feature, Import, Project

def project_from_graph(graph: Mapping[str, Sequence[str]],
                       features: Optional[Mapping[str, Iterable[Feature]]] = None) -> Project:
    """
    Create and analyze a project where each url imports the listed urls.
    """
    proj = Project()
    for url, imports in graph.items():
        feats = [Import(u) for u in imports]
        feats.extend((features or {}).get(url, ()))
        proj.add_document(Document(url, feats))
    proj.analyze_project()
    return proj

def result_from_graph(graph: Mapping[str, Sequence[str]],
                      features: Optional[Mapping[str, Iterable[Feature]]] = None) -> AnalysisResult:
    result = project_from_graph(graph, features).result
    assert result is not None
    return result

def urls(documents: Iterable[Document]) -> Dict[str, None]:
    return dict.fromkeys(d.url for d in documents)
