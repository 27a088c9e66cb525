import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import settings, configure_logging
from .estimator import estimate
from .schemas import CalculatorInputs, TaxEstimate, TaxTableRead
from .tax_config import InvalidBracketTable

logger = logging.getLogger(__name__)

configure_logging(settings.log_level)

app = FastAPI(title="Income Tax Estimator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/api/health")
def health_check():
    return {"status": "ok"}

@app.get("/api/tax-table", response_model=TaxTableRead)
def read_tax_table():
    """Configured brackets and deduction constants, for the default-table view."""
    return TaxTableRead(
        brackets=settings.brackets,
        per_dependent_monthly_deduction=settings.per_dependent_monthly_deduction,
        payroll_withholding_rate=settings.payroll_withholding_rate,
    )

@app.post("/api/estimate", response_model=TaxEstimate)
def estimate_tax(inputs: CalculatorInputs):
    """
    Recalculate the estimate for the current form state.
    The frontend posts the whole form on every change.
    """
    try:
        return estimate(inputs, settings)
    except InvalidBracketTable as e:
        raise HTTPException(status_code=422, detail=f"Invalid bracket table: {str(e)}")
    except Exception as e:
        logger.exception("Error computing estimate")
        raise HTTPException(status_code=500, detail=f"Estimate failed: {str(e)}")
