"""Google Analytics (ga.js) snippet builder."""
