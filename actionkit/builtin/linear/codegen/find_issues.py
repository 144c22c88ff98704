"""Find Issues step, rendered into exported standalone projects"""

CODEGEN_TEMPLATE = '''import os

import httpx

QUERY = """
query FindIssues($filter: IssueFilter) {
  issues(filter: $filter) {
    nodes { id title url }
  }
}
"""


async def find_issues_step(
    linear_assignee_id: str = "",
    linear_team_id: str = "",
    linear_status: str = "",
    linear_label: str = "",
) -> dict:
    filter_: dict = {}

    if linear_assignee_id:
        filter_["assignee"] = {"id": {"eq": linear_assignee_id}}

    if linear_team_id:
        filter_["team"] = {"id": {"eq": linear_team_id}}

    if linear_status and linear_status != "any":
        filter_["state"] = {"name": {"eqIgnoreCase": linear_status}}

    if linear_label:
        filter_["labels"] = {"name": {"eqIgnoreCase": linear_label}}

    async with httpx.AsyncClient() as client:
        response = await client.post(
            "https://api.linear.app/graphql",
            headers={"Authorization": os.environ["LINEAR_API_KEY"]},
            json={"query": QUERY, "variables": {"filter": filter_}},
        )
        response.raise_for_status()
        nodes = response.json()["data"]["issues"]["nodes"]

    return {
        "issues": [
            {"id": issue["id"], "title": issue["title"], "url": issue["url"]}
            for issue in nodes
        ],
        "count": len(nodes),
    }
'''
