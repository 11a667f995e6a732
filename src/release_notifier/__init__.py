"""Release Notifier - posts newly published cloud release notes to Slack.

Finds release notes published after a watermark date, asks an LLM for a
localized summary of each one, and posts the batch to a Slack channel.

Components:
- main_api: FastAPI trigger endpoints (/release-notes, /crawl)
- main_job: scheduled batch entry point
- pipeline: orchestration and Slack notification
- retrieval: BigQuery and page-scrape extractors
- llm: translation/summary client
- slack: Slack Web API integration
"""
