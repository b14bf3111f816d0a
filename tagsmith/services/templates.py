"""Tera templates handed to git-cliff.

git-cliff reads ``GIT_CLIFF_TEMPLATE`` as its ``--body`` argument and
``GIT_CLIFF__CHANGELOG__BODY`` as an override of ``changelog.body`` in the
project's cliff.toml. Each variable is only set for the invocation that
needs it.
"""

from __future__ import annotations

__all__ = [
    "CHANGELOG_BODY_ENV",
    "CHANGELOG_BODY_TEMPLATE",
    "TAG_DESCRIPTION_ENV",
    "TAG_DESCRIPTION_TEMPLATE",
]

TAG_DESCRIPTION_ENV = "GIT_CLIFF_TEMPLATE"
CHANGELOG_BODY_ENV = "GIT_CLIFF__CHANGELOG__BODY"

# Plain text for the tag annotation: breaking changes first, then every
# commit grouped by category. No line may start with "#", git reads those
# as comments when it cleans up a tag message.
TAG_DESCRIPTION_TEMPLATE = r"""
{%- set breaking_commits = commits | filter(attribute="breaking", value=true) -%}
{%- if breaking_commits | length > 0 %}
⚠️ BREAKING CHANGES ⚠️
{% for commit in breaking_commits %}
- {% if commit.scope %}{{ commit.scope }}: {% endif %}{{ commit.message | split(pat="\n") | first | upper_first | trim }}
{%- endfor %}
{% endif %}
{%- for group, commits in commits | group_by(attribute="group") %}
{{ group | striptags | trim | upper_first }}
{% for commit in commits %}
- {% if commit.breaking %}[BREAKING] {% endif %}{% if commit.scope %}{{ commit.scope }}: {% endif %}{{ commit.message | split(pat="\n") | first | upper_first | trim }}
{%- endfor %}
{% endfor %}
"""

CHANGELOG_BODY_TEMPLATE = r"""
{% if version -%}
## [{{ version | trim_start_matches(pat="v") }}] - {{ timestamp | date(format="%Y-%m-%d") }}
{% else -%}
## [unreleased]
{% endif -%}
{%- set breaking_commits = commits | filter(attribute="breaking", value=true) %}
{%- if breaking_commits | length > 0 %}

### 💥 BREAKING CHANGES 💥
{% for commit in breaking_commits %}
- {% if commit.scope %}**{{ commit.scope }}**: {% endif %}{{ commit.message | split(pat="\n") | first | upper_first | trim }}
{%- endfor %}
{% endif %}
{%- for group, commits in commits | group_by(attribute="group") %}

### {{ group | striptags | trim | upper_first }}
{% for commit in commits %}
- {% if commit.breaking %}[**‼️BREAKING‼️**] {% endif %}{% if commit.scope %}**{{ commit.scope }}**: {% endif %}{{ commit.message | split(pat="\n") | first | upper_first | trim }} ({{ commit.id | truncate(length=7, end="") }})
{%- endfor %}
{% endfor %}
"""
