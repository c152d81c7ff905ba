"""FXFolio - portfolio dashboard backend with FX-aware valuation and signals."""
