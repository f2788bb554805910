from fastapi import APIRouter, Depends

from analytics.filters import FilterCriteria, filter_graph
from analytics.overview import summarize
from analytics.render import to_flow_graph
from analytics.team_layout import layout_teams
from core.config import layout_config
from repository import GraphRepository
from routers.people import get_repository

router = APIRouter()


@router.get("/api/graph")
def get_graph(
    status:  str  = "",
    starred: bool = False,
    team:    str  = "",
    repo:    GraphRepository = Depends(get_repository),
):
    doc = repo.document()
    nodes, links = filter_graph(doc.nodes, doc.links, FilterCriteria(status, starred, team))
    layout = layout_teams(nodes, layout_config())
    result = to_flow_graph(layout, links, doc.nodes)
    result["total_people"] = len(doc.nodes)
    result["visible_people"] = len(nodes)
    return result


@router.get("/api/overview")
def overview(repo: GraphRepository = Depends(get_repository)):
    return summarize(repo.document())
