CODEGEN_TEMPLATE = '''import os

import httpx

MUTATION = """
mutation CreateIssue($input: IssueCreateInput!) {
  issueCreate(input: $input) {
    issue { id title url }
  }
}
"""


async def create_issue_step(ticket_title: str, ticket_description: str = "") -> dict:
    issue_input = {
        "teamId": os.environ["LINEAR_TEAM_ID"],
        "title": ticket_title,
        "description": ticket_description,
    }

    async with httpx.AsyncClient() as client:
        response = await client.post(
            "https://api.linear.app/graphql",
            headers={"Authorization": os.environ["LINEAR_API_KEY"]},
            json={"query": MUTATION, "variables": {"input": issue_input}},
        )
        response.raise_for_status()
        issue = response.json()["data"]["issueCreate"]["issue"]

    return {"id": issue["id"], "url": issue["url"], "title": issue["title"]}
'''
