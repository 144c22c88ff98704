"""Linear - issue tracking"""

from actionkit.plugins.schemas import (
    ActionDescriptor,
    ConfigField,
    ConfigFieldOption,
    CredentialTestConfig,
    FormField,
    HelpLink,
    OutputField,
    PluginDescriptor,
)

plugin = PluginDescriptor(
    type="linear",
    label="Linear",
    description="Create and search issues in Linear",
    icon="linear",
    form_fields=[
        FormField(
            id="apiKey",
            label="API Key",
            type="password",
            placeholder="lin_api_...",
            config_key="apiKey",
            env_var="LINEAR_API_KEY",
            help_text="Create a personal API key from ",
            help_link=HelpLink(
                text="Linear Settings > API",
                url="https://linear.app/settings/api",
            ),
        ),
        FormField(
            id="teamId",
            label="Default Team ID (optional)",
            type="text",
            placeholder="Team UUID",
            config_key="teamId",
            env_var="LINEAR_TEAM_ID",
        ),
    ],
    test_config=CredentialTestConfig.from_import_path(
        "actionkit.builtin.linear.credentials:check_credentials",
    ),
    codegen_package="actionkit.builtin.linear.codegen",
    actions=[
        ActionDescriptor(
            slug="create-issue",
            label="Create Ticket",
            description="Create a new issue in Linear",
            category="Linear",
            step_function="create_issue_step",
            step_import_path="create-issue",
            output_fields=[
                OutputField(field="id", description="Unique ID of the created issue"),
                OutputField(field="url", description="URL of the issue in Linear"),
                OutputField(field="title", description="Title of the issue"),
            ],
            config_fields=[
                ConfigField(
                    key="ticketTitle",
                    label="Ticket Title",
                    type="template-input",
                    placeholder="Bug report or {{NodeName.title}}",
                    example="Bug report",
                    required=True,
                ),
                ConfigField(
                    key="ticketDescription",
                    label="Description",
                    type="template-textarea",
                    placeholder="Description. Use {{NodeName.field}} to insert data.",
                    rows=4,
                ),
            ],
        ),
        ActionDescriptor(
            slug="find-issues",
            label="Find Issues",
            description="Search for issues in Linear",
            category="Linear",
            step_function="find_issues_step",
            step_import_path="find-issues",
            output_fields=[
                OutputField(field="issues", description="Array of issues found"),
                OutputField(field="count", description="Number of issues found"),
            ],
            config_fields=[
                ConfigField(
                    key="linearAssigneeId",
                    label="Assignee (User ID)",
                    type="template-input",
                    placeholder="user-id or {{NodeName.userId}}",
                ),
                ConfigField(
                    key="linearTeamId",
                    label="Team ID (optional)",
                    type="template-input",
                    placeholder="team-id or {{NodeName.teamId}}",
                ),
                ConfigField(
                    key="linearStatus",
                    label="Status (optional)",
                    type="select",
                    default_value="any",
                    options=[
                        ConfigFieldOption(value="any", label="Any"),
                        ConfigFieldOption(value="backlog", label="Backlog"),
                        ConfigFieldOption(value="todo", label="Todo"),
                        ConfigFieldOption(value="in_progress", label="In Progress"),
                        ConfigFieldOption(value="done", label="Done"),
                        ConfigFieldOption(value="canceled", label="Canceled"),
                    ],
                ),
                ConfigField(
                    key="linearLabel",
                    label="Label (optional)",
                    type="template-input",
                    placeholder="bug, feature, etc. or {{NodeName.label}}",
                ),
            ],
        ),
    ],
)
