"""Church Ledger: offerings, tithes and expenses of a church cash register."""
