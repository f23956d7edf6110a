"""Trade compounding calculator.

Computes how a starting capital grows across a fixed number of trades that
each return the same percentage, and encodes parameter sets as share links.

Submodules:
- compounder.portfolio: compounding engine and summary metrics
- compounder.validation: input validation for controls and share links
- compounder.share: share-link codec and clipboard collaborator
- compounder.reporting: formatting and trade detail tables
- compounder.core: calculation pipeline, session controller, logging setup
"""

__version__ = "0.1.0"
