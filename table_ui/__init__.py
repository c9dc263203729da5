"""pygame presentation of the blackjack table."""
